from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.workspaces.permissions import IsWorkspaceMember
from .exceptions import ReportsServiceError
from .serializers import ReportQuerySerializer, ReportSummarySerializer, ErrorSerializer
from .services import current_month_range, get_report_summary


@extend_schema(
    parameters=[
        OpenApiParameter('period', OpenApiTypes.STR, description='Month period (YYYY-MM)'),
        OpenApiParameter('start_date', OpenApiTypes.DATE, description='Start date (YYYY-MM-DD)'),
        OpenApiParameter('end_date', OpenApiTypes.DATE, description='End date (YYYY-MM-DD)'),
    ],
    responses={
        200: ReportSummarySerializer,
        400: ErrorSerializer,
        403: ErrorSerializer,
    },
    description="Spending summary of a workspace for a month or a date range (current month by default).",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsWorkspaceMember])
def report_summary(request, workspace_id):
    """Workspace spending summary - thin HTTP handler."""
    query_serializer = ReportQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    start_date = params.get('start_date')
    end_date = params.get('end_date')
    if start_date is None:
        start_date, end_date = current_month_range()

    try:
        summary = get_report_summary(
            workspace_id=workspace_id,
            start_date=start_date,
            end_date=end_date,
        )
    except ReportsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    data = {
        'start_date': start_date,
        'end_date': end_date,
        'total_amount': summary.total_amount,
        'ticket_count': summary.ticket_count,
        'store_count': summary.store_count,
        'average_ticket_amount': summary.average_ticket_amount,
        'by_payment_method': summary.by_payment_method,
        'by_store': summary.by_store,
        'by_category': summary.by_category,
        'recent_tickets': summary.recent_tickets,
    }
    return Response(ReportSummarySerializer(data).data)
