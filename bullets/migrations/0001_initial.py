import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Bullet',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('user_id', models.UUIDField(db_index=True, editable=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('category', models.CharField(default='general', max_length=100)),
                ('bullet', models.TextField()),
                ('impact', models.TextField(blank=True, null=True)),
                ('role_title', models.CharField(blank=True, max_length=255, null=True)),
                ('company', models.CharField(blank=True, max_length=255, null=True)),
                ('skills', models.JSONField(blank=True, default=list)),
            ],
            options={
                'verbose_name': 'Bullet',
                'verbose_name_plural': 'Bullet Bank',
                'db_table': 'bullet_bank',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
    ]
