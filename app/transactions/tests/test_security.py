import json

from django.urls import reverse

from rest_framework import status
from rest_framework.test import APITestCase

from transactions.models import Transaction


class TransactionAPISecurityTests(APITestCase):
    """
    Input-handling checks for the transaction API.
    """

    def setUp(self):
        self.transactions_url = reverse('transactions:transaction-list-create')
        self.payload = {
            'date': '03-11-2023',
            'type': 'spent',
            'amount': '10.00',
            'category': 'Groceries',
            'userId': 1,
        }

    def test_sql_injection_stored_verbatim(self):
        injections = [
            "'; DROP TABLE transactions_transaction; --",
            "1 OR 1=1",
            "1; SELECT * FROM auth_user",
        ]

        for injection in injections:
            response = self.client.post(self.transactions_url, dict(self.payload, category=injection))
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            transaction = Transaction.objects.get(id=response.json()['id'])
            self.assertEqual(transaction.category, injection)

            url = reverse('transactions:transaction-category', kwargs={'category': injection})
            response = self.client.get(url)
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            self.assertEqual(len(response.json()), 1)

        self.assertEqual(Transaction.objects.count(), len(injections))

    def test_injection_in_user_id_rejected(self):
        response = self.client.get(f"{self.transactions_url}?userId=1%20OR%201=1")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_error_messages_dont_expose_system_info(self):
        response = self.client.post(self.transactions_url, dict(self.payload, amount='not_a_number'))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response_str = json.dumps(response.json()).lower()
        for info in ['stacktrace', 'traceback', 'django', 'python', 'settings', 'debug']:
            self.assertNotIn(info, response_str)

    def test_unexpected_fields_not_stored(self):
        response = self.client.post(
            self.transactions_url,
            dict(self.payload, id=999, unexpected_field='suspicious data'),
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertNotEqual(body['id'], 999)
        self.assertNotIn('unexpected_field', body)

    def test_oversized_category_rejected(self):
        response = self.client.post(self.transactions_url, dict(self.payload, category='A' * 10000))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {'error': 'Invalid category'})
