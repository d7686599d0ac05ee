from django import forms
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from .models import VisaConfiguration

# ==========================================
# 1. BUILDER STEP 1 (Gate to Step 2)
# ==========================================


class VisaInfoForm(forms.Form):
    """
    Guard of the Step 1 -> Step 2 move.
    Each value is trimmed, then must hold at least 2 characters.
    """
    name = forms.CharField(min_length=2, label=_("Visa Name"))
    type_id = forms.CharField(min_length=2, label=_("Visa Type ID"))
    code = forms.CharField(min_length=2, label=_("Visa Code"))


# ==========================================
# 2. SAVED CONFIGURATIONS (Admin Side)
# ==========================================


class VisaConfigurationForm(forms.ModelForm):
    class Meta:
        model = VisaConfiguration
        fields = ['name', 'type_id', 'code', 'description', 'category',
                  'version', 'document', 'ai_scans', 'review_notes', 'is_active']

    def clean_version(self):
        version = self.cleaned_data.get('version')
        if version is not None and version < 1:
            raise ValidationError(_("Version starts at 1."))
        return version

    def clean(self):
        """
        Logic Validation: the stored document must stay a canonical one,
        i.e. carry a flow list and a matching type id.
        """
        cleaned_data = super().clean()
        document = cleaned_data.get('document')
        type_id = cleaned_data.get('type_id')

        if document is not None:
            if not isinstance(document, dict) or not isinstance(document.get('applicationFlow'), list):
                raise ValidationError({
                    'document': _("Document must contain an 'applicationFlow' list.")
                })
            if type_id and document.get('typeId') != type_id:
                raise ValidationError({
                    'type_id': _("Type ID does not match the stored document.")
                })
        return cleaned_data
