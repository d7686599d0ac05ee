from django.conf import settings
from django.db import models


class VisaConfiguration(models.Model):
    """
    One saved version of a visa type built with the visa builder.
    'document' holds the canonical configuration exactly as assembled.
    """
    # No length cap; Step 1 only enforces a 2-character minimum
    name = models.TextField()
    type_id = models.TextField(db_index=True, help_text="e.g. business-visitor")
    code = models.TextField(help_text="e.g. BV1")
    description = models.TextField(blank=True)
    category = models.CharField(
        max_length=50, help_text="e.g. Business, Tourist")

    # We use 'version' so saving a visa type again never overwrites the old one
    version = models.IntegerField(default=1)

    document = models.JSONField(default=dict)

    # Enabled AI validations, kept beside the document
    ai_scans = models.JSONField(default=list, blank=True)
    review_notes = models.TextField(blank=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='visa_configurations'
    )
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'visas_configuration'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.name} ({self.code}) v{self.version}"
