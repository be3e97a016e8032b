from rest_framework import serializers


# Справочники не хранятся в БД: обычные Serializer поверх dataclass-записей.


class StandardSerializer(serializers.Serializer):
    number = serializers.IntegerField()
    name = serializers.CharField()
    wiki = serializers.URLField()
    count = serializers.IntegerField()


class CurrencySerializer(serializers.Serializer):
    code = serializers.CharField(source="alpha3")
    name = serializers.CharField()
    numeric = serializers.CharField(allow_null=True)
    minor_unit = serializers.IntegerField()


class LanguageSerializer(serializers.Serializer):
    alpha2 = serializers.CharField()
    alpha3 = serializers.CharField()
    name = serializers.CharField()
    name2 = serializers.CharField()
    native_name = serializers.CharField()
    family = serializers.CharField()


class CountrySerializer(serializers.Serializer):
    alpha2 = serializers.CharField()
    alpha3 = serializers.CharField()
    name = serializers.CharField()
    name2 = serializers.CharField()
    native_name = serializers.CharField()
    capital = serializers.CharField()
    numeric = serializers.CharField()
    continent = serializers.CharField()
    continent_code = serializers.CharField()
    phones = serializers.ListField(child=serializers.IntegerField())
    currencies = serializers.ListField(child=serializers.CharField())
    languages = serializers.ListField(child=serializers.CharField())
    flag = serializers.CharField()
    wiki = serializers.URLField()


class CountryDetailSerializer(CountrySerializer):
    resolved_currencies = serializers.SerializerMethodField()
    resolved_languages = serializers.SerializerMethodField()

    def get_resolved_currencies(self, obj):
        return CurrencySerializer(obj.resolve_currencies(), many=True).data

    def get_resolved_languages(self, obj):
        return LanguageSerializer(obj.resolve_languages(), many=True).data
