from rest_framework import status, viewsets, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view
from apps.accounts.permissions import IsAdminRole
from .serializers import (
    RecyclableItemSerializer,
    RecyclableItemCreateSerializer,
    RecyclableItemUpdateSerializer,
)
from .services import (
    list_active_items,
    list_items,
    get_item,
    create_item,
    update_item,
    delete_item,
    ItemNotFoundError,
    DuplicateItemError,
    ItemInUseError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    responses={200: RecyclableItemSerializer(many=True)},
    description="Active recyclable items.",
    tags=['items'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def active_items(request):
    """List the active catalog."""
    items = list_active_items()
    return Response(RecyclableItemSerializer(items, many=True).data)


@extend_schema_view(
    list=extend_schema(responses={200: RecyclableItemSerializer(many=True)}, tags=['admin']),
    retrieve=extend_schema(responses={200: RecyclableItemSerializer}, tags=['admin']),
    create=extend_schema(
        request=RecyclableItemCreateSerializer,
        responses={201: RecyclableItemSerializer, 409: ErrorResponseSerializer},
        tags=['admin'],
    ),
    update=extend_schema(
        request=RecyclableItemUpdateSerializer,
        responses={200: RecyclableItemSerializer, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=['admin'],
    ),
    partial_update=extend_schema(
        request=RecyclableItemUpdateSerializer,
        responses={200: RecyclableItemSerializer, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=['admin'],
    ),
    destroy=extend_schema(
        responses={204: None, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=['admin'],
    ),
)
class ItemViewSet(viewsets.ViewSet):
    """
    Admin catalog management.

    list: All items including inactive ones
    create: Add an item (near-duplicate names are refused)
    retrieve: Get one item
    update / partial_update: Rename, change unit, toggle active
    destroy: Delete an item no transaction references
    """

    permission_classes = [IsAuthenticated, IsAdminRole]

    def list(self, request):
        return Response(RecyclableItemSerializer(list_items(), many=True).data)

    def retrieve(self, request, pk=None):
        try:
            item = get_item(item_id=pk)
        except ItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(RecyclableItemSerializer(item).data)

    def create(self, request):
        serializer = RecyclableItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            item = create_item(**serializer.validated_data)
        except DuplicateItemError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(RecyclableItemSerializer(item).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        serializer = RecyclableItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            item = update_item(item_id=pk, data=serializer.validated_data)
        except ItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateItemError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(RecyclableItemSerializer(item).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        try:
            delete_item(item_id=pk)
        except ItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ItemInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)
