"""Tests for analytics input serializers."""
from apps.analytics.serializers import AnalyticsRangeSerializer


class TestAnalyticsRangeSerializer:

    def test_defaults_to_seven_days(self):
        serializer = AnalyticsRangeSerializer(data={})
        assert serializer.is_valid()
        assert serializer.validated_data['range'] == '7d'

    def test_accepts_known_ranges(self):
        for value in ('7d', '30d', 'all'):
            serializer = AnalyticsRangeSerializer(data={'range': value})
            assert serializer.is_valid(), value

    def test_rejects_unknown_range(self):
        serializer = AnalyticsRangeSerializer(data={'range': '1y'})
        assert not serializer.is_valid()
        assert 'range' in serializer.errors
