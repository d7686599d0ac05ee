from django.urls import path
from ..views import *


urlpatterns = [
    # --- BUILDER (Working State) ---
    path("api/builder/state/", builder_state, name="api_builder_state"),
    path("api/builder/info/", builder_update_info, name="api_builder_info"),

    # Step 1: Flow & Documents
    path("api/builder/stages/toggle/", builder_stage_toggle,
         name="api_builder_stage_toggle"),
    path("api/builder/stages/reorder/", builder_stage_reorder,
         name="api_builder_stage_reorder"),
    path("api/builder/documents/", builder_document,
         name="api_builder_document"),
    path("api/builder/ai-scans/", builder_ai_scan, name="api_builder_ai_scan"),

    # Step 2: Costs & Processing (+ eligibility list)
    path("api/builder/ledger/", builder_ledger, name="api_builder_ledger"),

    # Navigation / Save / Reset
    path("api/builder/step/", builder_step, name="api_builder_step"),
    path("api/builder/save/", builder_save, name="api_builder_save"),
    path("api/builder/reset/", builder_reset, name="api_builder_reset"),

    # Step 3: printable summary
    path("builder/summary.pdf", builder_summary_pdf, name="builder_summary_pdf"),

    # --- SAVED CONFIGURATIONS ---
    path("api/configurations/", configuration_list_api,
         name="api_configurations"),
    path("api/configurations/<int:pk>/", configuration_detail_api,
         name="api_configuration_detail"),
]
