from django.contrib import admin

from .forms import VisaConfigurationForm
from .models import VisaConfiguration


@admin.register(VisaConfiguration)
class VisaConfigurationAdmin(admin.ModelAdmin):
    form = VisaConfigurationForm
    list_display = ('name', 'code', 'type_id', 'category',
                    'version', 'is_active', 'created_at')
    list_filter = ('category', 'is_active')
    search_fields = ('name', 'code', 'type_id')
    # Safety: the document is the saved artifact, edit through the builder
    readonly_fields = ('created_by', 'created_at', 'updated_at')
