import json
import logging

from django.contrib.auth.decorators import login_required
from django.core.paginator import Paginator
from django.db.models import Q
from django.http import HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET, require_POST

from .conf import builder_setting
from .models import VisaConfiguration
from .services.assembler import assemble_configuration, normalize_type_id
from .services.builder import DETAIL_FIELDS, INFO_FIELDS, VisaBuilder
from .services.export import render_summary_pdf
from .services.persistence import (
    ResumableCodeStore,
    next_version_for,
    save_configuration,
    serialize_configuration,
)
from .services.wizard import STEP_FLOW, STEP_LABELS, BuilderWizard

logger = logging.getLogger(__name__)


# ========================================================
# 0. SESSION HELPERS
# ========================================================

def _payload(request):
    """
    Reads the posted data: either a raw JSON body or the 'json_data'
    form field used by the dashboard scripts.
    """
    json_str = request.POST.get('json_data')
    if json_str is None and request.content_type == 'application/json':
        json_str = request.body.decode('utf-8') or '{}'
    if not json_str:
        return {}

    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError("Payload must be a JSON object.")
    return data


def _int(value, name='index'):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {name}: {value!r}")


def _load_wizard(request):
    """Rebuilds the working state of this browser, or starts a fresh one."""
    code_store = ResumableCodeStore(request.session)
    stored = request.session.get(builder_setting('SESSION_STATE_KEY'))

    if not stored:
        return BuilderWizard(VisaBuilder(code_store=code_store))

    builder = VisaBuilder.from_dict(stored['builder'], code_store=code_store)
    return BuilderWizard(builder, step=stored.get('step', STEP_FLOW))


def _store_wizard(request, wizard):
    request.session[builder_setting('SESSION_STATE_KEY')] = {
        'builder': wizard.builder.to_dict(),
        'step': wizard.step,
    }


def _state_data(wizard):
    builder = wizard.builder
    return {
        'step': wizard.step,
        'step_label': STEP_LABELS[wizard.step],
        'categories': builder.categories,
        'state': builder.to_dict(),
        'fixed_stages': list(builder.catalog.fixed_stages),
        'final_stages': list(builder.catalog.final_stages),
        'visible_stages': builder.catalog.visible(builder.category),
        'visible_documents': builder.documents.visible(builder.category),
        'documents_stage_active': builder.documents_stage_active(),
    }


def _commit(request, wizard, changed, **extra):
    _store_wizard(request, wizard)
    data = {'status': 'success', 'changed': bool(changed)}
    data.update(extra)
    data.update(_state_data(wizard))
    return JsonResponse(data)


def _error(message, status=400, **extra):
    data = {'status': 'error', 'message': message}
    data.update(extra)
    return JsonResponse(data, status=status)


# ========================================================
# 1. READ THE WORKING STATE
# ========================================================

@login_required
@require_GET
def builder_state(request):
    """
    API: Current working configuration plus the category projections the
    page renders (visible stages/documents).
    """
    wizard = _load_wizard(request)
    _store_wizard(request, wizard)
    data = {'status': 'success'}
    data.update(_state_data(wizard))
    return JsonResponse(data)


# ========================================================
# 2. STEP 1 / STEP 2 FIELDS
# ========================================================

@login_required
@require_POST
def builder_update_info(request):
    """
    API: Sets scalar fields. Payload: {"fields": {"name": "...", "code": "...",
    "category": "Work", "visa_cost_amount": "120", ...}}
    Unknown field names are ignored.
    """
    try:
        data = _payload(request)
        fields = data.get('fields', {})
        if not isinstance(fields, dict):
            raise ValueError("'fields' must be an object.")

        wizard = _load_wizard(request)
        builder = wizard.builder
        changed = False

        for field, value in fields.items():
            if field == 'category':
                changed = builder.set_category(value) or changed
            elif field in INFO_FIELDS:
                changed = builder.update_info(field, value) or changed
            elif field in DETAIL_FIELDS or field == 'review_notes':
                changed = builder.update_detail(field, value) or changed

        return _commit(request, wizard, changed)

    except ValueError as ve:
        return _error(str(ve))


# ========================================================
# 3. CONDITIONAL STAGES (Toggle & Reorder)
# ========================================================

@login_required
@require_POST
def builder_stage_toggle(request):
    try:
        data = _payload(request)
        wizard = _load_wizard(request)
        changed = wizard.builder.catalog.toggle(data.get('stage_id'))
        return _commit(request, wizard, changed)

    except ValueError as ve:
        return _error(str(ve))


@login_required
@require_POST
def builder_stage_reorder(request):
    """
    API: Drag & drop -> {"from_id": "...", "to_id": "..."}
         Keyboard    -> {"stage_id": "...", "offset": -1 | 1}
    Both act on the single canonical order.
    """
    try:
        data = _payload(request)
        wizard = _load_wizard(request)
        catalog = wizard.builder.catalog

        if 'offset' in data:
            changed = catalog.move(
                data.get('stage_id'), _int(data['offset'], 'offset'),
                wizard.builder.category)
        else:
            changed = catalog.reorder(data.get('from_id'), data.get('to_id'))

        return _commit(request, wizard, changed)

    except ValueError as ve:
        return _error(str(ve))


# ========================================================
# 4. DOCUMENT REQUIREMENTS
# ========================================================

@login_required
@require_POST
def builder_document(request):
    """
    API: One endpoint for the document modal.
    {"action": "add" | "remove" | "toggle" | "update" |
               "add_example" | "update_example" | "remove_example",
     "doc_id": ..., "field": ..., "value": ..., "index": ..., "confirm": true}
    """
    try:
        data = _payload(request)
        action = data.get('action')
        doc_id = data.get('doc_id')

        wizard = _load_wizard(request)
        documents = wizard.builder.documents
        extra = {}

        if action == 'add':
            new_doc = documents.add(wizard.builder.category)
            changed = True
            extra['document'] = new_doc
        elif action == 'remove':
            # Destructive: only with an explicit confirmation from the page
            changed = documents.remove(doc_id, confirmed=data.get('confirm') is True)
        elif action == 'toggle':
            changed = documents.toggle(doc_id)
        elif action == 'update':
            changed = documents.update_field(doc_id, data.get('field'), data.get('value'))
        elif action == 'add_example':
            changed = documents.add_example(doc_id)
        elif action == 'update_example':
            changed = documents.update_example(
                doc_id, _int(data.get('index')), data.get('value'))
        elif action == 'remove_example':
            changed = documents.remove_example(doc_id, _int(data.get('index')))
        else:
            raise ValueError(f"Unknown document action: {action}")

        return _commit(request, wizard, changed, **extra)

    except ValueError as ve:
        return _error(str(ve))


# ========================================================
# 5. ELIGIBILITY, PROCESSING TIERS & COSTS
# ========================================================

@login_required
@require_POST
def builder_ledger(request):
    """
    API: {"list": "criteria" | "tiers" | "costs",
          "action": "add" | "remove" | "update",
          "index": 0, "field": "amount", "value": "..."}
    """
    try:
        data = _payload(request)
        target = data.get('list')
        action = data.get('action')

        wizard = _load_wizard(request)
        builder = wizard.builder

        if target == 'criteria':
            if action == 'add':
                builder.add_criterion()
                changed = True
            elif action == 'remove':
                changed = builder.remove_criterion(_int(data.get('index')))
            elif action == 'update':
                changed = builder.update_criterion(_int(data.get('index')), data.get('value'))
            else:
                raise ValueError(f"Unknown action: {action}")

            return _commit(request, wizard, changed)

        entries = {
            'tiers': builder.processing_tiers,
            'costs': builder.additional_costs,
        }.get(target)
        if entries is None:
            raise ValueError(f"Unknown list: {target}")

        if action == 'add':
            entries.add()
            changed = True
        elif action == 'remove':
            changed = entries.remove(_int(data.get('index')))
        elif action == 'update':
            changed = entries.update(
                _int(data.get('index')), data.get('field'), data.get('value'))
        else:
            raise ValueError(f"Unknown action: {action}")

        return _commit(request, wizard, changed)

    except ValueError as ve:
        return _error(str(ve))


@login_required
@require_POST
def builder_ai_scan(request):
    try:
        data = _payload(request)
        wizard = _load_wizard(request)
        changed = wizard.builder.toggle_ai_scan(data.get('scan_id'))
        return _commit(request, wizard, changed)

    except ValueError as ve:
        return _error(str(ve))


# ========================================================
# 6. WIZARD NAVIGATION
# ========================================================

@login_required
@require_POST
def builder_step(request):
    """
    API: {"action": "next" | "back" | "review"}
    A refused move answers 400 with the per-field errors.
    """
    try:
        data = _payload(request)
        action = data.get('action')
        wizard = _load_wizard(request)

        if action == 'next':
            result = wizard.next_step()
        elif action == 'back':
            result = wizard.previous_step()
        elif action == 'review':
            result = wizard.review()
        else:
            raise ValueError(f"Unknown step action: {action}")

        if not result.ok:
            return _error('Validation Failed', errors=result.errors, step=wizard.step)

        return _commit(request, wizard, True)

    except ValueError as ve:
        return _error(str(ve))


@login_required
@require_POST
def builder_save(request):
    """
    API: "Confirm & Save" of Step 3. Assembles the document, stores it as
    a new VisaConfiguration version and returns it.
    """
    try:
        wizard = _load_wizard(request)
        builder = wizard.builder
        version = next_version_for(normalize_type_id(builder.type_id))
        saved = {}

        def persist(document):
            saved['config'] = save_configuration(
                document,
                ai_scans=builder.enabled_ai_scans(),
                review_notes=builder.review_notes,
                user=request.user,
            )

        result = wizard.save(persist=persist, version=version)
        if not result.ok:
            return _error('Validation Failed', errors=result.errors, step=wizard.step)

        _store_wizard(request, wizard)

        config = saved.get('config')
        return JsonResponse({
            'status': 'success',
            'step': wizard.step,
            'configuration_id': config.id if config else None,
            'document': result.document,
        })

    except Exception as e:
        logger.exception(f"Saving visa configuration failed: {e}")
        return _error("System Error. Check logs.", status=500)


@login_required
@require_POST
def builder_reset(request):
    wizard = _load_wizard(request)
    wizard.reset()
    return _commit(request, wizard, True)


# ========================================================
# 7. REVIEW SUMMARY (PDF)
# ========================================================

@login_required
@require_GET
def builder_summary_pdf(request):
    """
    Generates the review summary of the current (unsaved) configuration.
    """
    wizard = _load_wizard(request)
    builder = wizard.builder

    document = assemble_configuration(
        builder.snapshot(),
        version=next_version_for(normalize_type_id(builder.type_id)))

    pdf = render_summary_pdf(
        document,
        documents=builder.documents.to_list(),
        ai_scans=builder.enabled_ai_scans(),
        review_notes=builder.review_notes,
    )
    if pdf is None:
        return HttpResponse("We had some errors generating the summary.", status=500)

    response = HttpResponse(pdf, content_type='application/pdf')
    filename = f"visa_{document['code'] or 'draft'}_v{document['version']}.pdf"
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


# ========================================================
# 8. SAVED CONFIGURATIONS
# ========================================================

@login_required
@require_GET
def configuration_list_api(request):
    """
    API: Saved configurations, newest first.
    Filters: ?search=, ?category=, ?type_id=, ?page=
    """
    qs = VisaConfiguration.objects.select_related('created_by')

    search = request.GET.get('search', '').strip()
    if search:
        qs = qs.filter(
            Q(name__icontains=search) |
            Q(code__icontains=search) |
            Q(type_id__icontains=search)
        )

    category = request.GET.get('category', '').strip()
    if category:
        qs = qs.filter(category=category)

    type_id = request.GET.get('type_id', '').strip()
    if type_id:
        qs = qs.filter(type_id=type_id)

    paginator = Paginator(qs, 10)
    page_obj = paginator.get_page(request.GET.get('page', 1))

    return JsonResponse({
        'status': 'success',
        'data': [serialize_configuration(config) for config in page_obj],
        'pagination': {
            'current_page': page_obj.number,
            'total_pages': paginator.num_pages,
            'has_next': page_obj.has_next(),
            'has_previous': page_obj.has_previous(),
        }
    })


@login_required
@require_GET
def configuration_detail_api(request, pk):
    config = get_object_or_404(
        VisaConfiguration.objects.select_related('created_by'), pk=pk)
    return JsonResponse({
        'status': 'success',
        'configuration': serialize_configuration(config, with_document=True),
    })
