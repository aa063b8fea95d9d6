from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='RecyclableItem',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('name_normalized', models.CharField(editable=False, max_length=100, unique=True)),
                ('measurement_type', models.CharField(choices=[('count', 'Count'), ('weight', 'Weight (kg)')], default='count', max_length=10)),
                ('icon_url', models.URLField(blank=True, max_length=500)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'recyclable_items',
                'ordering': ['id'],
            },
        ),
    ]
