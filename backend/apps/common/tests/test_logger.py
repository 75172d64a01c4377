import unittest
from datetime import datetime, timezone
from decimal import Decimal

from apps.common import get_logger


class AppLoggerTests(unittest.TestCase):
    def test_bind_merges_context_without_mutating_parent(self):
        parent = get_logger('glowy.tests').bind(component='orders')
        child = parent.bind(service='OrderService')
        self.assertEqual(parent.context, {'component': 'orders'})
        self.assertEqual(child.context, {'component': 'orders', 'service': 'OrderService'})

    def test_context_is_appended_to_message(self):
        log = get_logger('glowy.tests').bind(component='carts')
        with self.assertLogs('glowy.tests', level='INFO') as captured:
            log.info('Cart item saved', cart_id=3, item_id=11)
        self.assertEqual(
            captured.records[0].getMessage(),
            'Cart item saved | component=carts cart_id=3 item_id=11',
        )

    def test_money_and_timestamps_render_plainly(self):
        log = get_logger('glowy.tests')
        stamp = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
        with self.assertLogs('glowy.tests', level='INFO') as captured:
            log.info('Order created', total_amount=Decimal('200.00'), at=stamp)
        self.assertEqual(
            captured.records[0].getMessage(),
            'Order created | total_amount=200.00 at=2025-03-01T12:00:00+00:00',
        )

    def test_exception_attaches_traceback(self):
        log = get_logger('glowy.tests')
        with self.assertLogs('glowy.tests', level='ERROR') as captured:
            try:
                raise ValueError('boom')
            except ValueError:
                log.exception('Order creation failed', user_id=7)
        record = captured.records[0]
        self.assertEqual(record.getMessage(), 'Order creation failed | user_id=7')
        self.assertIsNotNone(record.exc_info)
