from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.serializers import TableSerializer

from . import services
from .exceptions import InvalidInput, MissingFields
from .serializers import (
    AvailabilityQuerySerializer,
    ReservationCreateSerializer,
    ReservationDetailSerializer,
    ReservationSerializer,
)


class AvailabilityView(APIView):
    """
    GET /api/availability?date=YYYY-MM-DD&time=HH:MM&partySize=<n>&restaurantId=<id>

    Tables that seat the party and are free at that exact slot, smallest
    table first. An empty list is a normal "fully booked" answer.
    """

    @extend_schema(
        parameters=[
            OpenApiParameter("restaurantId", int, required=True),
            OpenApiParameter("date", str, required=True, description="YYYY-MM-DD"),
            OpenApiParameter("time", str, required=True, description="HH:MM (24-hour)"),
            OpenApiParameter("partySize", int, required=True),
        ],
        responses=TableSerializer(many=True),
    )
    def get(self, request: Request) -> Response:
        query = AvailabilityQuerySerializer(data=request.query_params)
        if not query.is_valid():
            raise InvalidInput(query.error_message())
        params = query.validated_data

        tables = services.find_available(
            params["restaurantId"], params["date"], params["time"], params["partySize"],
        )
        return Response(TableSerializer(tables, many=True).data)


class ReservationCreateView(APIView):
    """
    POST /api/reservations
      {restaurantId, tableId, date, time, partySize, guestName, guestEmail}

    200 {success: true, reservation} or 400 {error} when the request is
    incomplete, too close to the slot, or the slot is already booked.
    """

    @extend_schema(request=ReservationCreateSerializer, responses=ReservationSerializer)
    def post(self, request: Request) -> Response:
        body = ReservationCreateSerializer(data=request.data)
        if not body.is_valid():
            raise MissingFields(body.error_message())
        data = body.validated_data

        reservation = services.create_reservation(
            restaurant_id=data["restaurantId"],
            table_id=data["tableId"],
            date=data["date"],
            time=data["time"],
            party_size=data["partySize"],
            guest_name=data["guestName"],
            guest_email=data["guestEmail"],
        )
        return Response({"success": True, "reservation": ReservationSerializer(reservation).data})


class ReservationDetailView(APIView):
    """
    GET    /api/reservations/<id>  reservation detail for the confirmation page
    DELETE /api/reservations/<id>  soft-cancel
    """

    @extend_schema(responses=ReservationDetailSerializer)
    def get(self, request: Request, pk: str) -> Response:
        reservation = services.get_reservation(pk)
        return Response(ReservationDetailSerializer(reservation).data)

    @extend_schema(responses=ReservationSerializer)
    def delete(self, request: Request, pk: str) -> Response:
        reservation = services.cancel_reservation(pk)
        return Response({
            "message": "Reservation cancelled successfully",
            "reservation": ReservationSerializer(reservation).data,
        })
