from decimal import Decimal

from django.conf import settings
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import mixins, viewsets, status
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from apps.workspaces.mixins import WorkspaceScopedMixin
from .dates import date_to_iso_string, get_today_normalized, get_previous_day, get_next_day
from .exceptions import TicketServiceError
from .grouping import group_tickets_by_date
from .models import Ticket
from .serializers import (
    TicketSerializer,
    TicketListSerializer,
    TicketCreateSerializer,
    TicketUpdateSerializer,
    TicketFilterSerializer,
    DayQuerySerializer,
    TicketDayGroupSerializer,
    DayNavigationSerializer,
)
from .services import TicketService


class TicketPagination(PageNumberPagination):
    """Ticket list pagination, ``TICKETS_PAGE_SIZE`` per page."""
    page_size = settings.TICKETS_PAGE_SIZE
    page_size_query_param = 'page_size'
    max_page_size = 100


class TicketViewSet(
    WorkspaceScopedMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for the tickets of a workspace.

    list: Paginated tickets, newest first (``?date=YYYY-MM-DD`` filter)
    create: Create a ticket with nested items
    retrieve: Get a specific ticket
    partial_update: Update ticket fields
    destroy: Hard delete a ticket
    grouped: Tickets grouped by calendar day
    days: Previous/next day around ``?date=``
    """

    queryset = Ticket.objects.all()
    serializer_class = TicketSerializer
    pagination_class = TicketPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_queryset(self):
        filter_serializer = TicketFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        return TicketService.get_tickets(
            workspace_id=self.kwargs['workspace_id'],
            date=filter_serializer.validated_data.get('date'),
        )

    def get_serializer_class(self):
        if self.action in ('list', 'grouped'):
            return TicketListSerializer
        return TicketSerializer

    def _output(self, ticket, status_code=status.HTTP_200_OK):
        ticket = TicketService.get_ticket(
            workspace_id=self.kwargs['workspace_id'],
            ticket_id=ticket.id
        )
        return Response(TicketSerializer(ticket).data, status=status_code)

    @extend_schema(request=TicketCreateSerializer, responses={201: TicketSerializer})
    def create(self, request, *args, **kwargs):
        input_serializer = TicketCreateSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)
        data = input_serializer.validated_data

        try:
            ticket = TicketService.create_ticket(
                workspace_id=self.get_workspace().id,
                user=request.user,
                date=data['date'],
                total_amount=data['total_amount'],
                payment_method=data['payment_method'],
                items=data['items'],
                store=data.get('store'),
                installments=data.get('installments', 1),
                metadata=data.get('metadata'),
            )
        except TicketServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._output(ticket, status.HTTP_201_CREATED)

    @extend_schema(request=TicketUpdateSerializer, responses={200: TicketSerializer})
    def partial_update(self, request, *args, **kwargs):
        input_serializer = TicketUpdateSerializer(data=request.data, partial=True)
        input_serializer.is_valid(raise_exception=True)

        try:
            ticket = TicketService.update_ticket(
                workspace_id=self.kwargs['workspace_id'],
                ticket_id=kwargs['pk'],
                **input_serializer.validated_data
            )
        except TicketServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return self._output(ticket)

    def destroy(self, request, *args, **kwargs):
        TicketService.delete_ticket(
            workspace_id=self.kwargs['workspace_id'],
            ticket_id=kwargs['pk']
        )
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[OpenApiParameter('date', str, description='YYYY-MM-DD')],
        responses={200: TicketDayGroupSerializer(many=True)}
    )
    @action(detail=False, methods=['get'])
    def grouped(self, request, workspace_id=None):
        """
        Tickets grouped by calendar day, newest day first.

        GET /api/workspaces/{workspace_id}/tickets/grouped/
        """
        groups = group_tickets_by_date(self.get_queryset())

        payload = [
            {
                'date': day,
                'ticket_count': len(tickets),
                'total_amount': sum((t.total_amount for t in tickets), Decimal('0')),
                'tickets': tickets,
            }
            for day, tickets in groups.items()
        ]
        return Response(TicketDayGroupSerializer(payload, many=True).data)

    @extend_schema(
        parameters=[DayQuerySerializer],
        responses={200: DayNavigationSerializer}
    )
    @action(detail=False, methods=['get'])
    def days(self, request, workspace_id=None):
        """
        Day navigation around ``?date=`` (today when omitted).

        GET /api/workspaces/{workspace_id}/tickets/days/?date=2025-03-04
        """
        query_serializer = DayQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        day = date_to_iso_string(
            query_serializer.validated_data.get('date') or get_today_normalized()
        )
        return Response({
            'date': day,
            'previous': get_previous_day(day),
            'next': get_next_day(day),
        })
