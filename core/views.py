from __future__ import annotations

from drf_spectacular.utils import extend_schema
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Table
from .serializers import RestaurantSerializer, TableSerializer
from .services import get_restaurant_by_subdomain


class RestaurantDetailView(APIView):
    """
    GET /api/restaurants/<subdomain>

    Resolves a tenant by subdomain and returns it with its tables ordered
    by number, for rendering the floor plan.
    """

    @extend_schema(responses=RestaurantSerializer)
    def get(self, request: Request, subdomain: str) -> Response:
        restaurant = get_restaurant_by_subdomain(subdomain)
        return Response(RestaurantSerializer(restaurant).data)


class TableViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only table listing, filterable by ``restaurant`` and exact ``capacity``.
    """
    queryset = Table.objects.select_related("restaurant").order_by("restaurant_id", "number")
    serializer_class = TableSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ["restaurant", "capacity"]
