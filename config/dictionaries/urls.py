from django.urls import path

from .api_views import (
    CountryDetailView,
    CountryListView,
    CurrencyDetailView,
    CurrencyListView,
    LanguageDetailView,
    LanguageListView,
    StandardListView,
)


urlpatterns = [
    path("standards/", StandardListView.as_view(), name="standards-list"),
    path("currencies/", CurrencyListView.as_view(), name="currencies-list"),
    path("currencies/<str:key>/", CurrencyDetailView.as_view(), name="currencies-detail"),
    path("countries/", CountryListView.as_view(), name="countries-list"),
    path("countries/<str:key>/", CountryDetailView.as_view(), name="countries-detail"),
    path("languages/", LanguageListView.as_view(), name="languages-list"),
    path("languages/<str:key>/", LanguageDetailView.as_view(), name="languages-detail"),
]
