import logging
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.db import IntegrityError, transaction

from stationery.core.permissions import IsStaffRole
from stationery.core.snapshots import fetch_missing_reports, fetch_recent_missing_reports
from .serializers import MissingReportSerializer

logger = logging.getLogger('stationery.inventory')


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsStaffRole])
def missing_report_list_create(request):
    """List missing-item reports (newest first, optional ?limit=N) or file a new one"""
    if request.method == 'GET':
        limit = request.query_params.get('limit')
        if limit:
            try:
                limit = int(limit)
            except ValueError:
                return Response({'error': 'limit must be a positive integer'}, status=status.HTTP_400_BAD_REQUEST)
            if limit <= 0:
                return Response({'error': 'limit must be a positive integer'}, status=status.HTTP_400_BAD_REQUEST)
        return Response(fetch_missing_reports(limit=limit or None))

    serializer = MissingReportSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        with transaction.atomic():
            report = serializer.save(reported_by=request.user.email)
    except IntegrityError as e:
        logger.error(f"IntegrityError creating missing report: {str(e)}", exc_info=True)
        return Response({'error': 'Database error occurred while submitting the report'}, status=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error(f"Unexpected error creating missing report: {str(e)}", exc_info=True)
        return Response({'error': f'Failed to submit report: {str(e)}'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    # Stock counts are left as they are; the report is a record only
    logger.info(f"{report.quantity} x {report.item_name} reported missing by {report.reported_by}")

    return Response({
        'report': MissingReportSerializer(report).data,
        'missingReports': fetch_missing_reports(),
        'recentMissingReports': fetch_recent_missing_reports(),
    }, status=status.HTTP_201_CREATED)
