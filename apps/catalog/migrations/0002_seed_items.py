from django.core.management.color import no_style
from django.db import migrations


INITIAL_ITEMS = [
    (1, 'Plastic Bottle', 'count', 'https://img.freepik.com/premium-vector/bottle-icon-logo-vector-design-template_827767-2072.jpg'),
    (2, 'Aluminium Tin', 'count', 'https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcTpF0lvByzhOEqZj24Hw2VLNOWtDD77_3DREQ&s'),
    (3, 'Newspaper', 'weight', 'https://thumbs.dreamstime.com/b/newspaper-icon-18554603.jpg'),
    (4, 'Glass', 'count', 'https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcQSWsnlxD1xXMFnuBtnhLOjb373Hgg5SuT76g&s'),
    (5, 'Cardboard', 'weight', 'https://images.vexels.com/media/users/3/146452/isolated/preview/ff1dff030e21fb04a43b2303f3d75ec2-open-cardboard-box-icon.png'),
]


def seed_items(apps, schema_editor):
    RecyclableItem = apps.get_model('catalog', 'RecyclableItem')

    for item_id, name, measurement_type, icon_url in INITIAL_ITEMS:
        RecyclableItem.objects.update_or_create(
            id=item_id,
            defaults={
                'name': name,
                'name_normalized': name.lower(),
                'measurement_type': measurement_type,
                'icon_url': icon_url,
            }
        )

    # Explicit ids do not advance the sequence on PostgreSQL
    connection = schema_editor.connection
    statements = connection.ops.sequence_reset_sql(no_style(), [RecyclableItem])
    with connection.cursor() as cursor:
        for sql in statements:
            cursor.execute(sql)


def unseed_items(apps, schema_editor):
    RecyclableItem = apps.get_model('catalog', 'RecyclableItem')
    RecyclableItem.objects.filter(id__in=[row[0] for row in INITIAL_ITEMS]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_items, unseed_items),
    ]
