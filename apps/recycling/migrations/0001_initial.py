import django.core.validators
import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='RecyclingSession',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('collection_centre', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='recorded_sessions', to=settings.AUTH_USER_MODEL)),
                ('recycler', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='recycling_sessions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'recycling_sessions',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['collection_centre', 'created_at'], name='sessions_centre_created_idx'),
                    models.Index(fields=['recycler', 'created_at'], name='sessions_recycler_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='RecyclingTransaction',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('quantity', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('collection_centre', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='recorded_transactions', to=settings.AUTH_USER_MODEL)),
                ('item', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='catalog.recyclableitem')),
                ('recycler', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='recycling_transactions', to=settings.AUTH_USER_MODEL)),
                ('session', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='transactions', to='recycling.recyclingsession')),
            ],
            options={
                'db_table': 'recycling_transactions',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['collection_centre', 'created_at'], name='tx_centre_created_idx'),
                    models.Index(fields=['recycler', 'created_at'], name='tx_recycler_created_idx'),
                    models.Index(fields=['created_at'], name='tx_created_idx'),
                ],
            },
        ),
    ]
