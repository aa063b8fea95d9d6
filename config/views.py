from django.db import connection, DatabaseError
from django.http import JsonResponse
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@extend_schema(
    responses={200: inline_serializer(
        name='HealthResponse',
        fields={
            'ok': serializers.BooleanField(),
            'database': serializers.BooleanField(),
        },
    )},
    description="Liveness probe; reports whether the database answers.",
    tags=['health'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Health check endpoint."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        database_ok = True
    except DatabaseError:
        database_ok = False

    return Response({
        'ok': True,
        'database': database_ok,
    })


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
