"""Account URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.accounts.views import AccountCollectionView, AccountDetailView

urlpatterns = [
    path("accounts/", AccountCollectionView.as_view(), name="account-list"),
    path("accounts/<str:pk>/", AccountDetailView.as_view(), name="account-detail"),
]
