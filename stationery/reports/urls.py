from django.urls import path
from . import views

urlpatterns = [
    path('reports/stock-summary/', views.stock_summary, name='stock-summary'),
    path('reports/stock-report/print/', views.stock_report_print, name='stock-report-print'),
    path('reports/stock-report/pdf/', views.stock_report_pdf, name='stock-report-pdf'),
]
