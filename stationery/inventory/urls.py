from django.urls import path
from .views import missing_report_list_create

urlpatterns = [
    path('missing-reports/', missing_report_list_create, name='missing-report-list-create'),
]
