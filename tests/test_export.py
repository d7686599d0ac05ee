"""
Review summary rendering.
"""

import pytest

from visas.services import export
from visas.services.assembler import assemble_configuration


@pytest.fixture
def document(filled_builder, fixed_now):
    filled_builder.documents.toggle('invitation_letter')
    return assemble_configuration(filled_builder.snapshot(), now=fixed_now)


def test_summary_html_uses_display_names(filled_builder, document):
    html = export.render_summary_html(
        document,
        documents=filled_builder.documents.to_list(),
        ai_scans=['FACE_MATCHING'],
        review_notes='Approved by ops',
    )

    assert 'Business Visitor Visa' in html
    assert 'KYC &amp; Liveness Check' in html
    assert 'Invitation Letter' in html
    assert 'FACE_MATCHING' in html
    assert 'Approved by ops' in html


def test_summary_html_falls_back_to_ids(document):
    html = export.render_summary_html(document)
    assert 'invitation_letter' in html
    assert 'Review Notes' not in html


def test_summary_pdf(document):
    assert export.render_summary_pdf(document).startswith(b'%PDF')


def test_summary_pdf_failure_returns_none(document, monkeypatch):
    class FailedStatus:
        err = 1

    monkeypatch.setattr(export.pisa, 'CreatePDF', lambda html, dest: FailedStatus())
    assert export.render_summary_pdf(document) is None
