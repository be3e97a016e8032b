from rest_framework.exceptions import NotFound
from rest_framework.generics import ListAPIView, RetrieveAPIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .exceptions import RecordNotFound
from .logic.catalog import Catalog
from .logic.countries import countries
from .logic.currencies import currencies
from .logic.languages import languages
from .serializers import (
    CountryDetailSerializer,
    CountrySerializer,
    CurrencySerializer,
    LanguageSerializer,
    StandardSerializer,
)


def _split_keys(raw: str) -> list[str]:
    return [key.strip() for key in raw.split(",") if key.strip()]


class CatalogListView(ListAPIView):
    """
    Весь справочник в порядке каталога.

    ?keys=USA,ZZZ,GBR -> только найденные записи, в порядке ключей (промахи молча пропускаем).
    """

    permission_classes = [AllowAny]
    catalog: Catalog = None

    def get_queryset(self):
        raw_keys = self.request.query_params.get("keys")
        if raw_keys is None:
            return self.catalog.all()
        return self.catalog.filter(_split_keys(raw_keys))


class CatalogDetailView(RetrieveAPIView):
    permission_classes = [AllowAny]
    catalog: Catalog = None

    def get_object(self):
        try:
            return self.catalog.get(self.kwargs["key"])
        except RecordNotFound:
            raise NotFound(f"{self.catalog.standard.name}: not found.")


class CurrencyListView(CatalogListView):
    catalog = currencies
    serializer_class = CurrencySerializer


class CurrencyDetailView(CatalogDetailView):
    catalog = currencies
    serializer_class = CurrencySerializer


class LanguageListView(CatalogListView):
    catalog = languages
    serializer_class = LanguageSerializer


class LanguageDetailView(CatalogDetailView):
    catalog = languages
    serializer_class = LanguageSerializer


class CountryListView(CatalogListView):
    catalog = countries
    serializer_class = CountrySerializer


class CountryDetailView(CatalogDetailView):
    catalog = countries
    serializer_class = CountryDetailSerializer


class StandardListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        items = [
            {
                "number": catalog.standard.number,
                "name": catalog.standard.name,
                "wiki": catalog.standard.wiki,
                "count": len(catalog),
            }
            for catalog in (countries, currencies, languages)
        ]
        return Response(StandardSerializer(items, many=True).data)
