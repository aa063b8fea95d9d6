from django.db import models
import re


class MeasurementType(models.TextChoices):
    COUNT = 'count', 'Count'
    WEIGHT = 'weight', 'Weight (kg)'


class RecyclableItem(models.Model):
    """
    A material accepted at collection centres.

    Weight items are entered in kilograms and stored in grams on
    transactions; count items are stored as whole units.
    """

    id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=100)
    name_normalized = models.CharField(max_length=100, unique=True, editable=False)
    measurement_type = models.CharField(
        max_length=10,
        choices=MeasurementType.choices,
        default=MeasurementType.COUNT
    )
    icon_url = models.URLField(max_length=500, blank=True)
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recyclable_items'
        ordering = ['id']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        self.name_normalized = self._normalize_string(self.name)
        super().save(*args, **kwargs)

    @staticmethod
    def _normalize_string(text):
        text = text.lower().strip()
        text = re.sub(r'\s+', ' ', text)
        text = re.sub(r'[^\w\s-]', '', text)
        return text

    @property
    def is_weight_based(self):
        return self.measurement_type == MeasurementType.WEIGHT
