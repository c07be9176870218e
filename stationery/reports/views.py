import logging
from rest_framework.decorators import api_view, permission_classes, renderer_classes
from rest_framework.renderers import TemplateHTMLRenderer
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.http import HttpResponse

from stationery.core.permissions import IsStaffRole
from .pdf import render_stock_report_pdf
from .services import build_stock_report

logger = logging.getLogger('stationery.reports')


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def stock_summary(request):
    """Stock report figures as JSON"""
    return Response(build_stock_report())


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
@renderer_classes([TemplateHTMLRenderer])
def stock_report_print(request):
    """Printable HTML rendering; the page opens the browser print dialog on load"""
    report = build_stock_report()
    return Response({'report': report}, template_name='reports/stock_report.html')


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsStaffRole])
def stock_report_pdf(request):
    """Download the stock report as Stock-Report-<date>.pdf"""
    report = build_stock_report()
    pdf_bytes = render_stock_report_pdf(report)
    logger.info(f"Stock report PDF generated by {request.user.email} ({report['summary']['totalItems']} items)")

    response = HttpResponse(pdf_bytes, content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{report["title"]}.pdf"'
    return response
