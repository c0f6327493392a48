from django.apps import apps
from rest_framework import status
from rest_framework.views import APIView

from utils import api_response, error_response

from .errors import TransactionServiceError
from .serializers import TransactionSerializer


class TransactionServiceMixin:
    # Override with as_view(service=...) to inject a different service
    service = None

    def get_service(self):
        if self.service is not None:
            return self.service
        return apps.get_app_config('transactions').service

    def user_id_param(self):
        return self.request.query_params.get('userId')

    def list_response(self, fetch):
        try:
            transactions = fetch()
        except TransactionServiceError as e:
            return error_response(e)
        serializer = TransactionSerializer(transactions, many=True)
        return api_response(status.HTTP_200_OK, serializer.data)


class TransactionListCreateView(TransactionServiceMixin, APIView):
    def get(self, request):
        return self.list_response(lambda: self.get_service().list(user_id=self.user_id_param()))

    def post(self, request):
        try:
            transaction = self.get_service().create(request.data)
        except TransactionServiceError as e:
            return error_response(e)
        serializer = TransactionSerializer(transaction)
        return api_response(status.HTTP_200_OK, serializer.data)


class TransactionSpentListView(TransactionServiceMixin, APIView):
    def get(self, request):
        return self.list_response(lambda: self.get_service().list_spent(user_id=self.user_id_param()))


class TransactionReceiveListView(TransactionServiceMixin, APIView):
    def get(self, request):
        return self.list_response(lambda: self.get_service().list_receive(user_id=self.user_id_param()))


class TransactionByCategoryView(TransactionServiceMixin, APIView):
    def get(self, request, category):
        return self.list_response(
            lambda: self.get_service().list_by_category(category, user_id=self.user_id_param())
        )


class TransactionDetailView(TransactionServiceMixin, APIView):
    def put(self, request, pk):
        try:
            transaction = self.get_service().update(pk, request.data, user_id=self.user_id_param())
        except TransactionServiceError as e:
            return error_response(e)
        serializer = TransactionSerializer(transaction)
        return api_response(status.HTTP_200_OK, serializer.data)

    def delete(self, request, pk):
        try:
            result = self.get_service().delete(pk, user_id=self.user_id_param())
        except TransactionServiceError as e:
            return error_response(e)
        return api_response(status.HTTP_200_OK, result)
