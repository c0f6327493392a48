from django.urls import path

from .views import (
    TransactionByCategoryView,
    TransactionDetailView,
    TransactionListCreateView,
    TransactionReceiveListView,
    TransactionSpentListView,
)

app_name = 'transactions'

urlpatterns = [
    path('transactions', TransactionListCreateView.as_view(), name='transaction-list-create'),
    path('transactions/spent', TransactionSpentListView.as_view(), name='transaction-spent'),
    path('transactions/receive', TransactionReceiveListView.as_view(), name='transaction-receive'),
    path('transactions/category/<str:category>', TransactionByCategoryView.as_view(), name='transaction-category'),
    path('transactions/<int:pk>', TransactionDetailView.as_view(), name='transaction-detail'),
]
