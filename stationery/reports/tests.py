"""
Test suite for the stock report (JSON summary, print view, PDF export)
"""
import datetime
import re
from django.test import TestCase
from django.utils import timezone
from reportlab.lib.pagesizes import A4
from rest_framework import status
from stationery.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from stationery.reports.pdf import CONTENT_WIDTH, build_inventory_table, render_stock_report_pdf
from stationery.reports.services import build_stock_report, report_title


class StockReportServiceTests(TestCase):
    """Test the report aggregation"""

    def setUp(self):
        TestDataFactory.create_item(name='Stapler', total_stock=10, available_stock=1)
        TestDataFactory.create_item(name='Pen', total_stock=100, available_stock=40)
        TestDataFactory.create_item(name='Marker', category='OP Non-Stock', total_stock=4, available_stock=4,
                                    brand='Snowman')
        TestDataFactory.create_item(name='Toner', category='OP Non-Stock', total_stock=0, available_stock=0)

    def test_totals(self):
        report = build_stock_report()
        self.assertEqual(report['summary'], {
            'totalItems': 4,
            'totalAvailableStock': 45,
            'opStockItems': 2,
            'opNonStockItems': 2,
        })

    def test_category_breakdown(self):
        report = build_stock_report()
        self.assertEqual(report['categories'], [
            {'category': 'OP Stock', 'itemCount': 2, 'totalAvailable': 41},
            {'category': 'OP Non-Stock', 'itemCount': 2, 'totalAvailable': 4},
        ])

    def test_rows_grouped_by_category_and_sorted_by_name(self):
        report = build_stock_report()
        sections = {section['category']: [row['name'] for row in section['items']] for section in report['sections']}
        self.assertEqual(sections, {'OP Stock': ['Pen', 'Stapler'], 'OP Non-Stock': ['Marker', 'Toner']})
        self.assertEqual([row['name'] for row in report['items']], ['Marker', 'Pen', 'Stapler', 'Toner'])

    def test_percentages_and_levels(self):
        rows = {row['name']: row for row in build_stock_report()['items']}
        self.assertEqual((rows['Stapler']['percentDisplay'], rows['Stapler']['stockLevel']), ('10.0%', 'red'))
        self.assertEqual((rows['Pen']['percentDisplay'], rows['Pen']['stockLevel']), ('40.0%', 'orange'))
        self.assertEqual((rows['Marker']['percentDisplay'], rows['Marker']['stockLevel']), ('100.0%', 'green'))
        self.assertIsNone(rows['Toner']['percentAvailable'])
        self.assertEqual(rows['Toner']['percentDisplay'], '-')

    def test_report_title_uses_local_date(self):
        moment = timezone.make_aware(datetime.datetime(2024, 5, 31, 10, 30))
        self.assertEqual(report_title(moment), 'Stock-Report-2024-05-31')

    def test_pdf_bytes(self):
        pdf = render_stock_report_pdf(build_stock_report())
        self.assertTrue(pdf.startswith(b'%PDF'))

    def test_pdf_paginates_long_inventories(self):
        for index in range(120):
            TestDataFactory.create_item(name=f'Bulk item {index:03d}', total_stock=5, available_stock=index % 6)
        pdf = render_stock_report_pdf(build_stock_report())
        page_counts = [int(count) for count in re.findall(rb'/Count (\d+)', pdf)]
        self.assertGreater(max(page_counts), 1)

    def test_long_item_names_wrap_within_page_width(self):
        TestDataFactory.create_item(name='Heavy Duty Long Reach Stapler & Staple Remover Combo Pack ' * 3)
        table = build_inventory_table(build_stock_report())
        width, _ = table.wrap(CONTENT_WIDTH, A4[1])
        self.assertLessEqual(round(width, 2), round(CONTENT_WIDTH, 2))
        self.assertTrue(render_stock_report_pdf(build_stock_report()).startswith(b'%PDF'))


class StockReportAPITests(TestCase):
    """Test the report endpoints and their role check"""

    def setUp(self):
        self.staff = TestDataFactory.create_staff()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.staff)
        TestDataFactory.create_item(name='Stapler', total_stock=10, available_stock=10)

    def test_stock_summary(self):
        response = self.client.get('/api/v1/reports/stock-summary/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['summary']['totalItems'], 1)
        self.assertTrue(response.data['title'].startswith('Stock-Report-'))

    def test_print_view(self):
        response = self.client.get('/api/v1/reports/stock-report/print/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        content = response.content.decode()
        self.assertIn('window.print()', content)
        self.assertIn('Stationery Inventory Report', content)
        self.assertIn('Stapler', content)
        self.assertIn('Stock by Category', content)

    def test_pdf_download(self):
        response = self.client.get('/api/v1/reports/stock-report/pdf/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response['Content-Type'], 'application/pdf')
        self.assertRegex(response['Content-Disposition'], r'attachment; filename="Stock-Report-\d{4}-\d{2}-\d{2}\.pdf"')
        self.assertTrue(response.content.startswith(b'%PDF'))

    def test_lecturer_cannot_access_reports(self):
        self.client.authenticate_user(TestDataFactory.create_user())
        for url in ('/api/v1/reports/stock-summary/', '/api/v1/reports/stock-report/pdf/'):
            self.assertEqual(self.client.get(url).status_code, status.HTTP_403_FORBIDDEN)
