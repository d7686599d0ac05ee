from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='VisaConfiguration',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.TextField()),
                ('type_id', models.TextField(db_index=True, help_text='e.g. business-visitor')),
                ('code', models.TextField(help_text='e.g. BV1')),
                ('description', models.TextField(blank=True)),
                ('category', models.CharField(help_text='e.g. Business, Tourist', max_length=50)),
                ('version', models.IntegerField(default=1)),
                ('document', models.JSONField(default=dict)),
                ('ai_scans', models.JSONField(blank=True, default=list)),
                ('review_notes', models.TextField(blank=True)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='visa_configurations', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'visas_configuration',
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
