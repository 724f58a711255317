from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FieldDefinition',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('identifier', models.SlugField(unique=True)),
                ('name', models.CharField(max_length=255)),
                ('field_type_identifier', models.CharField(db_index=True, help_text='Registered field type, e.g. ezbinaryfile or ezmedia', max_length=50)),
                ('field_settings', models.JSONField(blank=True, default=dict, help_text='Field type settings, e.g. {"mediaType": "html5_video"}')),
                ('validator_configuration', models.JSONField(blank=True, default=dict, help_text='Validator parameters, e.g. {"FileSizeValidator": {"maxFileSize": 10}}')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Field Definition',
                'verbose_name_plural': 'Field Definitions',
                'ordering': ['identifier'],
            },
        ),
    ]
