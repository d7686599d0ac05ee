import logging
from io import BytesIO

from django.template.loader import render_to_string
from xhtml2pdf import pisa

from .. import defaults

logger = logging.getLogger(__name__)

SUMMARY_TEMPLATE = 'visas/pdf/configuration_summary.html'


def _stage_names():
    names = {}
    for group in (defaults.FIXED_STAGES, defaults.CONDITIONAL_STAGES, defaults.FINAL_STAGES):
        for stage in group:
            names[stage['id']] = stage['name']
    return names


def render_summary_html(document, documents=None, ai_scans=None, review_notes=''):
    """Renders the Step 3 review page of an assembled document as HTML."""
    stage_names = _stage_names()
    doc_names = {doc['id']: doc.get('name') or doc['id'] for doc in (documents or [])}

    context = {
        'config': document,
        'flow': [
            {'id': stage_id, 'name': stage_names.get(stage_id, stage_id)}
            for stage_id in document['applicationFlow']
        ],
        'required_documents': [
            {'id': doc_id, 'name': doc_names.get(doc_id, doc_id)}
            for doc_id in document['requiredDocuments']
        ],
        'ai_scans': ai_scans or [],
        'review_notes': review_notes,
    }
    return render_to_string(SUMMARY_TEMPLATE, context)


def render_summary_pdf(document, documents=None, ai_scans=None, review_notes=''):
    """
    Returns the PDF bytes, or None when xhtml2pdf reports an error.
    """
    html = render_summary_html(document, documents, ai_scans, review_notes)

    result = BytesIO()
    pisa_status = pisa.CreatePDF(html, dest=result)

    if pisa_status.err:
        logger.error(f"PDF rendering failed for {document['typeId']} ({pisa_status.err} errors)")
        return None

    return result.getvalue()
