# -*- coding: utf-8 -*-
# config/dictionaries/data/countries.py
"""ISO 3166-1 country table. Order is the catalog order."""

from config.dictionaries.models import Country


COUNTRIES: tuple[Country, ...] = (
    Country(
        alpha2="AF", alpha3="AFG", name="Afghanistan", name2="Afghanistan",
        native_name="افغانستان", capital="Kabul", numeric="004",
        continent="Asia", continent_code="AS",
        phones=(93,), currencies=("AFN",), languages=("ps", "uz", "tk"),
        flag="🇦🇫", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AF",
    ),
    Country(
        alpha2="AX", alpha3="ALA", name="Åland Islands", name2="Aland",
        native_name="Åland", capital="Mariehamn", numeric="248",
        continent="Europe", continent_code="EU",
        phones=(358,), currencies=("EUR",), languages=("sv",),
        flag="🇦🇽", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AX",
    ),
    Country(
        alpha2="AL", alpha3="ALB", name="Albania", name2="Albania",
        native_name="Shqipëria", capital="Tirana", numeric="008",
        continent="Europe", continent_code="EU",
        phones=(355,), currencies=("ALL",), languages=("sq",),
        flag="🇦🇱", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AL",
    ),
    Country(
        alpha2="DZ", alpha3="DZA", name="Algeria", name2="Algeria",
        native_name="الجزائر", capital="Algiers", numeric="012",
        continent="Africa", continent_code="AF",
        phones=(213,), currencies=("DZD",), languages=("ar",),
        flag="🇩🇿", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:DZ",
    ),
    Country(
        alpha2="AO", alpha3="AGO", name="Angola", name2="Angola",
        native_name="Angola", capital="Luanda", numeric="024",
        continent="Africa", continent_code="AF",
        phones=(244,), currencies=("AOA",), languages=("pt",),
        flag="🇦🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AO",
    ),
    Country(
        alpha2="AI", alpha3="AIA", name="Anguilla", name2="Anguilla",
        native_name="Anguilla", capital="The Valley", numeric="660",
        continent="North America", continent_code="NA",
        phones=(1264,), currencies=("XCD",), languages=("en",),
        flag="🇦🇮", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AI",
    ),
    Country(
        alpha2="AD", alpha3="AND", name="Andorra", name2="Andorra",
        native_name="Andorra", capital="Andorra la Vella", numeric="020",
        continent="Europe", continent_code="EU",
        phones=(376,), currencies=("EUR",), languages=("ca",),
        flag="🇦🇩", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AD",
    ),
    Country(
        alpha2="AS", alpha3="ASM", name="American Samoa", name2="American Samoa",
        native_name="American Samoa", capital="Pago Pago", numeric="016",
        continent="Oceania", continent_code="OC",
        phones=(1684,), currencies=("USD",), languages=("en", "sm"),
        flag="🇦🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AS",
    ),
    Country(
        alpha2="AQ", alpha3="ATA", name="Antarctica", name2="Antarctica",
        native_name="Antarctica", capital="", numeric="010",
        continent="Antarctica", continent_code="AN",
        phones=(672,), currencies=(), languages=(),
        flag="🇦🇶", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AQ",
    ),
    Country(
        alpha2="AG", alpha3="ATG", name="Antigua and Barbuda", name2="Antigua and Barbuda",
        native_name="Antigua and Barbuda", capital="Saint John's", numeric="028",
        continent="North America", continent_code="NA",
        phones=(1268,), currencies=("XCD",), languages=("en",),
        flag="🇦🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AG",
    ),
    Country(
        alpha2="AR", alpha3="ARG", name="Argentina", name2="Argentina",
        native_name="Argentina", capital="Buenos Aires", numeric="032",
        continent="South America", continent_code="SA",
        phones=(54,), currencies=("ARS",), languages=("es", "gn"),
        flag="🇦🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AR",
    ),
    Country(
        alpha2="AM", alpha3="ARM", name="Armenia", name2="Armenia",
        native_name="Հայաստան", capital="Yerevan", numeric="051",
        continent="Asia", continent_code="AS",
        phones=(374,), currencies=("AMD",), languages=("hy", "ru"),
        flag="🇦🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AM",
    ),
    Country(
        alpha2="AW", alpha3="ABW", name="Aruba", name2="Aruba",
        native_name="Aruba", capital="Oranjestad", numeric="533",
        continent="North America", continent_code="NA",
        phones=(297,), currencies=("AWG",), languages=("nl", "pa"),
        flag="🇦🇼", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AW",
    ),
    Country(
        alpha2="AU", alpha3="AUS", name="Australia", name2="Australia",
        native_name="Australia", capital="Canberra", numeric="036",
        continent="Oceania", continent_code="OC",
        phones=(61,), currencies=("AUD",), languages=("en",),
        flag="🇦🇺", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AU",
    ),
    Country(
        alpha2="AT", alpha3="AUT", name="Austria", name2="Austria",
        native_name="Österreich", capital="Vienna", numeric="040",
        continent="Europe", continent_code="EU",
        phones=(43,), currencies=("EUR",), languages=("de",),
        flag="🇦🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AT",
    ),
    Country(
        alpha2="AZ", alpha3="AZE", name="Azerbaijan", name2="Azerbaijan",
        native_name="Azərbaycan", capital="Baku", numeric="031",
        continent="Asia", continent_code="AS",
        phones=(994,), currencies=("AZN",), languages=("az",),
        flag="🇦🇿", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AZ",
    ),
    Country(
        alpha2="BS", alpha3="BHS", name="Bahamas", name2="Bahamas",
        native_name="Bahamas", capital="Nassau", numeric="044",
        continent="North America", continent_code="NA",
        phones=(1242,), currencies=("BSD",), languages=("en",),
        flag="🇧🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BS",
    ),
    Country(
        alpha2="BH", alpha3="BHR", name="Bahrain", name2="Bahrain",
        native_name="‏البحرين", capital="Manama", numeric="048",
        continent="Asia", continent_code="AS",
        phones=(973,), currencies=("BHD",), languages=("ar",),
        flag="🇧🇭", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BH",
    ),
    Country(
        alpha2="BD", alpha3="BGD", name="Bangladesh", name2="Bangladesh",
        native_name="Bangladesh", capital="Dhaka", numeric="050",
        continent="Asia", continent_code="AS",
        phones=(880,), currencies=("BDT",), languages=("bn",),
        flag="🇧🇩", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BD",
    ),
    Country(
        alpha2="BB", alpha3="BRB", name="Barbados", name2="Barbados",
        native_name="Barbados", capital="Bridgetown", numeric="052",
        continent="North America", continent_code="NA",
        phones=(1246,), currencies=("BBD",), languages=("en",),
        flag="🇧🇧", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BB",
    ),
    Country(
        alpha2="BY", alpha3="BLR", name="Belarus", name2="Belarus",
        native_name="Белару́сь", capital="Minsk", numeric="112",
        continent="Europe", continent_code="EU",
        phones=(375,), currencies=("BYN",), languages=("be", "ru"),
        flag="🇧🇾", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BY",
    ),
    Country(
        alpha2="BE", alpha3="BEL", name="Belgium", name2="Belgium",
        native_name="België", capital="Brussels", numeric="056",
        continent="Europe", continent_code="EU",
        phones=(32,), currencies=("EUR",), languages=("nl", "fr", "de"),
        flag="🇧🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BE",
    ),
    Country(
        alpha2="BZ", alpha3="BLZ", name="Belize", name2="Belize",
        native_name="Belize", capital="Belmopan", numeric="084",
        continent="North America", continent_code="NA",
        phones=(501,), currencies=("BZD",), languages=("en", "es"),
        flag="🇧🇿", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BZ",
    ),
    Country(
        alpha2="BJ", alpha3="BEN", name="Benin", name2="Benin",
        native_name="Bénin", capital="Porto-Novo", numeric="204",
        continent="Africa", continent_code="AF",
        phones=(229,), currencies=("XOF",), languages=("fr",),
        flag="🇧🇯", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BJ",
    ),
    Country(
        alpha2="BM", alpha3="BMU", name="Bermuda", name2="Bermuda",
        native_name="Bermuda", capital="Hamilton", numeric="060",
        continent="North America", continent_code="NA",
        phones=(1441,), currencies=("BMD",), languages=("en",),
        flag="🇧🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BM",
    ),
    Country(
        alpha2="BT", alpha3="BTN", name="Bhutan", name2="Bhutan",
        native_name="ʼbrug-yul", capital="Thimphu", numeric="064",
        continent="Asia", continent_code="AS",
        phones=(975,), currencies=("BTN", "INR"), languages=("dz",),
        flag="🇧🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BT",
    ),
    Country(
        alpha2="BO", alpha3="BOL", name="Bolivia (Plurinational State of)", name2="Bolivia",
        native_name="Bolivia", capital="Sucre", numeric="068",
        continent="South America", continent_code="SA",
        phones=(591,), currencies=("BOB", "BOV"), languages=("es", "ay", "qu"),
        flag="🇧🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BO",
    ),
    Country(
        alpha2="BQ", alpha3="BES", name="Bonaire, Sint Eustatius and Saba", name2="Bonaire",
        native_name="Bonaire", capital="Kralendijk", numeric="535",
        continent="North America", continent_code="NA",
        phones=(5997,), currencies=("USD",), languages=("nl",),
        flag="🇧🇶", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BQ",
    ),
    Country(
        alpha2="BA", alpha3="BIH", name="Bosnia and Herzegovina", name2="Bosnia and Herzegovina",
        native_name="Bosna i Hercegovina", capital="Sarajevo", numeric="070",
        continent="Europe", continent_code="EU",
        phones=(387,), currencies=("BAM",), languages=("bs", "hr", "sr"),
        flag="🇧🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BA",
    ),
    Country(
        alpha2="BW", alpha3="BWA", name="Botswana", name2="Botswana",
        native_name="Botswana", capital="Gaborone", numeric="072",
        continent="Africa", continent_code="AF",
        phones=(267,), currencies=("BWP",), languages=("en", "tn"),
        flag="🇧🇼", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BW",
    ),
    Country(
        alpha2="BV", alpha3="BVT", name="Bouvet Island", name2="Bouvet Island",
        native_name="Bouvetøya", capital="", numeric="074",
        continent="Antarctica", continent_code="AN",
        phones=(47,), currencies=("NOK",), languages=("no", "nb", "nn"),
        flag="🇧🇻", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BV",
    ),
    Country(
        alpha2="BR", alpha3="BRA", name="Brazil", name2="Brazil",
        native_name="Brasil", capital="Brasília", numeric="076",
        continent="South America", continent_code="SA",
        phones=(55,), currencies=("BRL",), languages=("pt",),
        flag="🇧🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BR",
    ),
    Country(
        alpha2="IO", alpha3="IOT", name="British Indian Ocean Territory", name2="British Indian Ocean Territory",
        native_name="British Indian Ocean Territory", capital="Diego Garcia", numeric="086",
        continent="Asia", continent_code="AS",
        phones=(246,), currencies=("USD",), languages=("en",),
        flag="🇮🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:IO",
    ),
    Country(
        alpha2="BN", alpha3="BRN", name="Brunei Darussalam", name2="Brunei",
        native_name="Negara Brunei Darussalam", capital="Bandar Seri Begawan", numeric="096",
        continent="Asia", continent_code="AS",
        phones=(673,), currencies=("BND",), languages=("ms",),
        flag="🇧🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BN",
    ),
    Country(
        alpha2="BG", alpha3="BGR", name="Bulgaria", name2="Bulgaria",
        native_name="България", capital="Sofia", numeric="100",
        continent="Europe", continent_code="EU",
        phones=(359,), currencies=("BGN",), languages=("bg",),
        flag="🇧🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BG",
    ),
    Country(
        alpha2="BF", alpha3="BFA", name="Burkina Faso", name2="Burkina Faso",
        native_name="Burkina Faso", capital="Ouagadougou", numeric="854",
        continent="Africa", continent_code="AF",
        phones=(226,), currencies=("XOF",), languages=("fr", "ff"),
        flag="🇧🇫", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BF",
    ),
    Country(
        alpha2="BI", alpha3="BDI", name="Burundi", name2="Burundi",
        native_name="Burundi", capital="Bujumbura", numeric="108",
        continent="Africa", continent_code="AF",
        phones=(257,), currencies=("BIF",), languages=("fr", "rn"),
        flag="🇧🇮", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BI",
    ),
    Country(
        alpha2="CV", alpha3="CPV", name="Cabo Verde", name2="Cape Verde",
        native_name="Cabo Verde", capital="Praia", numeric="132",
        continent="Africa", continent_code="AF",
        phones=(238,), currencies=("CVE",), languages=("pt",),
        flag="🇨🇻", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CV",
    ),
    Country(
        alpha2="KH", alpha3="KHM", name="Cambodia", name2="Cambodia",
        native_name="Kâmpŭchéa", capital="Phnom Penh", numeric="116",
        continent="Asia", continent_code="AS",
        phones=(855,), currencies=("KHR",), languages=("km",),
        flag="🇰🇭", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KH",
    ),
    Country(
        alpha2="CM", alpha3="CMR", name="Cameroon", name2="Cameroon",
        native_name="Cameroon", capital="Yaoundé", numeric="120",
        continent="Africa", continent_code="AF",
        phones=(237,), currencies=("XAF",), languages=("en", "fr"),
        flag="🇨🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CM",
    ),
    Country(
        alpha2="CA", alpha3="CAN", name="Canada", name2="Canada",
        native_name="Canada", capital="Ottawa", numeric="124",
        continent="North America", continent_code="NA",
        phones=(1,), currencies=("CAD",), languages=("en", "fr"),
        flag="🇨🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CA",
    ),
    Country(
        alpha2="KY", alpha3="CYM", name="Cayman Islands", name2="Cayman Islands",
        native_name="Cayman Islands", capital="George Town", numeric="136",
        continent="North America", continent_code="NA",
        phones=(1345,), currencies=("KYD",), languages=("en",),
        flag="🇰🇾", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KY",
    ),
    Country(
        alpha2="CF", alpha3="CAF", name="Central African Republic", name2="Central African Republic",
        native_name="Ködörösêse tî Bêafrîka", capital="Bangui", numeric="140",
        continent="Africa", continent_code="AF",
        phones=(236,), currencies=("XAF",), languages=("fr", "sg"),
        flag="🇨🇫", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CF",
    ),
    Country(
        alpha2="TD", alpha3="TCD", name="Chad", name2="Chad",
        native_name="Tchad", capital="N'Djamena", numeric="148",
        continent="Africa", continent_code="AF",
        phones=(235,), currencies=("XAF",), languages=("fr", "ar"),
        flag="🇹🇩", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TD",
    ),
    Country(
        alpha2="CL", alpha3="CHL", name="Chile", name2="Chile",
        native_name="Chile", capital="Santiago", numeric="152",
        continent="South America", continent_code="SA",
        phones=(56,), currencies=("CLF", "CLP"), languages=("es",),
        flag="🇨🇱", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CL",
    ),
    Country(
        alpha2="CN", alpha3="CHN", name="China", name2="China",
        native_name="中国", capital="Beijing", numeric="156",
        continent="Asia", continent_code="AS",
        phones=(86,), currencies=("CNY",), languages=("zh",),
        flag="🇨🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CN",
    ),
    Country(
        alpha2="CX", alpha3="CXR", name="Christmas Island", name2="Christmas Island",
        native_name="Christmas Island", capital="Flying Fish Cove", numeric="162",
        continent="Asia", continent_code="AS",
        phones=(61,), currencies=("AUD",), languages=("en",),
        flag="🇨🇽", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CX",
    ),
    Country(
        alpha2="CC", alpha3="CCK", name="Cocos (Keeling) Islands", name2="Cocos (Keeling) Islands",
        native_name="Cocos (Keeling) Islands", capital="West Island", numeric="166",
        continent="Asia", continent_code="AS",
        phones=(61,), currencies=("AUD",), languages=("en",),
        flag="🇨🇨", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CC",
    ),
    Country(
        alpha2="CO", alpha3="COL", name="Colombia", name2="Colombia",
        native_name="Colombia", capital="Bogotá", numeric="170",
        continent="South America", continent_code="SA",
        phones=(57,), currencies=("COP",), languages=("es",),
        flag="🇨🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CO",
    ),
    Country(
        alpha2="KM", alpha3="COM", name="Comoros", name2="Comoros",
        native_name="Komori", capital="Moroni", numeric="174",
        continent="Africa", continent_code="AF",
        phones=(269,), currencies=("KMF",), languages=("ar", "fr"),
        flag="🇰🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KM",
    ),
    Country(
        alpha2="CG", alpha3="COG", name="Congo", name2="Republic of the Congo",
        native_name="République du Congo", capital="Brazzaville", numeric="178",
        continent="Africa", continent_code="AF",
        phones=(242,), currencies=("XAF",), languages=("fr", "ln"),
        flag="🇨🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CG",
    ),
    Country(
        alpha2="CD", alpha3="COD", name="Congo, Democratic Republic of the", name2="Democratic Republic of the Congo",
        native_name="République démocratique du Congo", capital="Kinshasa", numeric="180",
        continent="Africa", continent_code="AF",
        phones=(243,), currencies=("CDF",), languages=("fr", "ln", "kg", "sw", "lu"),
        flag="🇨🇩", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CD",
    ),
    Country(
        alpha2="CK", alpha3="COK", name="Cook Islands", name2="Cook Islands",
        native_name="Cook Islands", capital="Avarua", numeric="184",
        continent="Oceania", continent_code="OC",
        phones=(682,), currencies=("NZD",), languages=("en",),
        flag="🇨🇰", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CK",
    ),
    Country(
        alpha2="CR", alpha3="CRI", name="Costa Rica", name2="Costa Rica",
        native_name="Costa Rica", capital="San José", numeric="188",
        continent="North America", continent_code="NA",
        phones=(506,), currencies=("CRC",), languages=("es",),
        flag="🇨🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CR",
    ),
    Country(
        alpha2="CI", alpha3="CIV", name="Côte d'Ivoire", name2="Ivory Coast",
        native_name="Côte d'Ivoire", capital="Yamoussoukro", numeric="384",
        continent="Africa", continent_code="AF",
        phones=(225,), currencies=("XOF",), languages=("fr",),
        flag="🇨🇮", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CI",
    ),
    Country(
        alpha2="HR", alpha3="HRV", name="Croatia", name2="Croatia",
        native_name="Hrvatska", capital="Zagreb", numeric="191",
        continent="Europe", continent_code="EU",
        phones=(385,), currencies=("EUR",), languages=("hr",),
        flag="🇭🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:HR",
    ),
    Country(
        alpha2="CU", alpha3="CUB", name="Cuba", name2="Cuba",
        native_name="Cuba", capital="Havana", numeric="192",
        continent="North America", continent_code="NA",
        phones=(53,), currencies=("CUC", "CUP"), languages=("es",),
        flag="🇨🇺", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CU",
    ),
    Country(
        alpha2="CW", alpha3="CUW", name="Curaçao", name2="Curacao",
        native_name="Curaçao", capital="Willemstad", numeric="531",
        continent="North America", continent_code="NA",
        phones=(5999,), currencies=("ANG",), languages=("nl", "pa", "en"),
        flag="🇨🇼", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CW",
    ),
    Country(
        alpha2="CY", alpha3="CYP", name="Cyprus", name2="Cyprus",
        native_name="Κύπρος", capital="Nicosia", numeric="196",
        continent="Europe", continent_code="EU",
        phones=(357,), currencies=("EUR",), languages=("el", "tr", "hy"),
        flag="🇨🇾", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CY",
    ),
    Country(
        alpha2="CZ", alpha3="CZE", name="Czechia", name2="Czech Republic",
        native_name="Česká republika", capital="Prague", numeric="203",
        continent="Europe", continent_code="EU",
        phones=(420,), currencies=("CZK",), languages=("cs",),
        flag="🇨🇿", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CZ",
    ),
    Country(
        alpha2="DK", alpha3="DNK", name="Denmark", name2="Denmark",
        native_name="Danmark", capital="Copenhagen", numeric="208",
        continent="Europe", continent_code="EU",
        phones=(45,), currencies=("DKK",), languages=("da",),
        flag="🇩🇰", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:DK",
    ),
    Country(
        alpha2="DJ", alpha3="DJI", name="Djibouti", name2="Djibouti",
        native_name="Djibouti", capital="Djibouti", numeric="262",
        continent="Africa", continent_code="AF",
        phones=(253,), currencies=("DJF",), languages=("fr", "ar"),
        flag="🇩🇯", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:DJ",
    ),
    Country(
        alpha2="DM", alpha3="DMA", name="Dominica", name2="Dominica",
        native_name="Dominica", capital="Roseau", numeric="212",
        continent="North America", continent_code="NA",
        phones=(1767,), currencies=("XCD",), languages=("en",),
        flag="🇩🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:DM",
    ),
    Country(
        alpha2="DO", alpha3="DOM", name="Dominican Republic", name2="Dominican Republic",
        native_name="República Dominicana", capital="Santo Domingo", numeric="214",
        continent="North America", continent_code="NA",
        phones=(1809, 1829, 1849), currencies=("DOP",), languages=("es",),
        flag="🇩🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:DO",
    ),
    Country(
        alpha2="EC", alpha3="ECU", name="Ecuador", name2="Ecuador",
        native_name="Ecuador", capital="Quito", numeric="218",
        continent="South America", continent_code="SA",
        phones=(593,), currencies=("USD",), languages=("es",),
        flag="🇪🇨", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:EC",
    ),
    Country(
        alpha2="EG", alpha3="EGY", name="Egypt", name2="Egypt",
        native_name="مصر‎", capital="Cairo", numeric="818",
        continent="Africa", continent_code="AF",
        phones=(20,), currencies=("EGP",), languages=("ar",),
        flag="🇪🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:EG",
    ),
    Country(
        alpha2="SV", alpha3="SLV", name="El Salvador", name2="El Salvador",
        native_name="El Salvador", capital="San Salvador", numeric="222",
        continent="North America", continent_code="NA",
        phones=(503,), currencies=("SVC", "USD"), languages=("es",),
        flag="🇸🇻", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SV",
    ),
    Country(
        alpha2="GQ", alpha3="GNQ", name="Equatorial Guinea", name2="Equatorial Guinea",
        native_name="Guinea Ecuatorial", capital="Malabo", numeric="226",
        continent="Africa", continent_code="AF",
        phones=(240,), currencies=("XAF",), languages=("es", "fr"),
        flag="🇬🇶", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GQ",
    ),
    Country(
        alpha2="ER", alpha3="ERI", name="Eritrea", name2="Eritrea",
        native_name="ኤርትራ", capital="Asmara", numeric="232",
        continent="Africa", continent_code="AF",
        phones=(291,), currencies=("ERN",), languages=("ti", "ar", "en"),
        flag="🇪🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:ER",
    ),
    Country(
        alpha2="EE", alpha3="EST", name="Estonia", name2="Estonia",
        native_name="Eesti", capital="Tallinn", numeric="233",
        continent="Europe", continent_code="EU",
        phones=(372,), currencies=("EUR",), languages=("et",),
        flag="🇪🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:EE",
    ),
    Country(
        alpha2="SZ", alpha3="SWZ", name="Eswatini", name2="Eswatini",
        native_name="Eswatini", capital="Lobamba", numeric="748",
        continent="Africa", continent_code="AF",
        phones=(268,), currencies=("SZL",), languages=("en", "ss"),
        flag="🇸🇿", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SZ",
    ),
    Country(
        alpha2="ET", alpha3="ETH", name="Ethiopia", name2="Ethiopia",
        native_name="ኢትዮጵያ", capital="Addis Ababa", numeric="231",
        continent="Africa", continent_code="AF",
        phones=(251,), currencies=("ETB",), languages=("am",),
        flag="🇪🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:ET",
    ),
    Country(
        alpha2="FK", alpha3="FLK", name="Falkland Islands (Malvinas)", name2="Falkland Islands",
        native_name="Falkland Islands", capital="Stanley", numeric="238",
        continent="South America", continent_code="SA",
        phones=(500,), currencies=("FKP",), languages=("en",),
        flag="🇫🇰", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:FK",
    ),
    Country(
        alpha2="FO", alpha3="FRO", name="Faroe Islands", name2="Faroe Islands",
        native_name="Føroyar", capital="Tórshavn", numeric="234",
        continent="Europe", continent_code="EU",
        phones=(298,), currencies=("DKK",), languages=("fo",),
        flag="🇫🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:FO",
    ),
    Country(
        alpha2="FJ", alpha3="FJI", name="Fiji", name2="Fiji",
        native_name="Fiji", capital="Suva", numeric="242",
        continent="Oceania", continent_code="OC",
        phones=(679,), currencies=("FJD",), languages=("en", "fj", "hi", "ur"),
        flag="🇫🇯", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:FJ",
    ),
    Country(
        alpha2="FI", alpha3="FIN", name="Finland", name2="Finland",
        native_name="Suomi", capital="Helsinki", numeric="246",
        continent="Europe", continent_code="EU",
        phones=(358,), currencies=("EUR",), languages=("fi", "sv"),
        flag="🇫🇮", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:FI",
    ),
    Country(
        alpha2="FR", alpha3="FRA", name="France", name2="France",
        native_name="France", capital="Paris", numeric="250",
        continent="Europe", continent_code="EU",
        phones=(33,), currencies=("EUR",), languages=("fr",),
        flag="🇫🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:FR",
    ),
    Country(
        alpha2="GF", alpha3="GUF", name="French Guiana", name2="French Guiana",
        native_name="Guyane française", capital="Cayenne", numeric="254",
        continent="South America", continent_code="SA",
        phones=(594,), currencies=("EUR",), languages=("fr",),
        flag="🇬🇫", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GF",
    ),
    Country(
        alpha2="PF", alpha3="PYF", name="French Polynesia", name2="French Polynesia",
        native_name="Polynésie française", capital="Papeetē", numeric="258",
        continent="Oceania", continent_code="OC",
        phones=(689,), currencies=("XPF",), languages=("fr",),
        flag="🇵🇫", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PF",
    ),
    Country(
        alpha2="TF", alpha3="ATF", name="French Southern Territories", name2="French Southern Territories",
        native_name="Territoire des Terres australes et antarctiques fr", capital="Port-aux-Français", numeric="260",
        continent="Antarctica", continent_code="AN",
        phones=(262,), currencies=("EUR",), languages=("fr",),
        flag="🇹🇫", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TF",
    ),
    Country(
        alpha2="GA", alpha3="GAB", name="Gabon", name2="Gabon",
        native_name="Gabon", capital="Libreville", numeric="266",
        continent="Africa", continent_code="AF",
        phones=(241,), currencies=("XAF",), languages=("fr",),
        flag="🇬🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GA",
    ),
    Country(
        alpha2="GM", alpha3="GMB", name="Gambia", name2="Gambia",
        native_name="Gambia", capital="Banjul", numeric="270",
        continent="Africa", continent_code="AF",
        phones=(220,), currencies=("GMD",), languages=("en",),
        flag="🇬🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GM",
    ),
    Country(
        alpha2="GE", alpha3="GEO", name="Georgia", name2="Georgia",
        native_name="საქართველო", capital="Tbilisi", numeric="268",
        continent="Asia", continent_code="AS",
        phones=(995,), currencies=("GEL",), languages=("ka",),
        flag="🇬🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GE",
    ),
    Country(
        alpha2="DE", alpha3="DEU", name="Germany", name2="Germany",
        native_name="Deutschland", capital="Berlin", numeric="276",
        continent="Europe", continent_code="EU",
        phones=(49,), currencies=("EUR",), languages=("de",),
        flag="🇩🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:DE",
    ),
    Country(
        alpha2="GH", alpha3="GHA", name="Ghana", name2="Ghana",
        native_name="Ghana", capital="Accra", numeric="288",
        continent="Africa", continent_code="AF",
        phones=(233,), currencies=("GHS",), languages=("en",),
        flag="🇬🇭", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GH",
    ),
    Country(
        alpha2="GI", alpha3="GIB", name="Gibraltar", name2="Gibraltar",
        native_name="Gibraltar", capital="Gibraltar", numeric="292",
        continent="Europe", continent_code="EU",
        phones=(350,), currencies=("GIP",), languages=("en",),
        flag="🇬🇮", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GI",
    ),
    Country(
        alpha2="GR", alpha3="GRC", name="Greece", name2="Greece",
        native_name="Ελλάδα", capital="Athens", numeric="300",
        continent="Europe", continent_code="EU",
        phones=(30,), currencies=("EUR",), languages=("el",),
        flag="🇬🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GR",
    ),
    Country(
        alpha2="GL", alpha3="GRL", name="Greenland", name2="Greenland",
        native_name="Kalaallit Nunaat", capital="Nuuk", numeric="304",
        continent="North America", continent_code="NA",
        phones=(299,), currencies=("DKK",), languages=("kl",),
        flag="🇬🇱", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GL",
    ),
    Country(
        alpha2="GD", alpha3="GRD", name="Grenada", name2="Grenada",
        native_name="Grenada", capital="St. George's", numeric="308",
        continent="North America", continent_code="NA",
        phones=(1473,), currencies=("XCD",), languages=("en",),
        flag="🇬🇩", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GD",
    ),
    Country(
        alpha2="GP", alpha3="GLP", name="Guadeloupe", name2="Guadeloupe",
        native_name="Guadeloupe", capital="Basse-Terre", numeric="312",
        continent="North America", continent_code="NA",
        phones=(590,), currencies=("EUR",), languages=("fr",),
        flag="🇬🇵", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GP",
    ),
    Country(
        alpha2="GU", alpha3="GUM", name="Guam", name2="Guam",
        native_name="Guam", capital="Hagåtña", numeric="316",
        continent="Oceania", continent_code="OC",
        phones=(1671,), currencies=("USD",), languages=("en", "ch", "es"),
        flag="🇬🇺", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GU",
    ),
    Country(
        alpha2="GT", alpha3="GTM", name="Guatemala", name2="Guatemala",
        native_name="Guatemala", capital="Guatemala City", numeric="320",
        continent="North America", continent_code="NA",
        phones=(502,), currencies=("GTQ",), languages=("es",),
        flag="🇬🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GT",
    ),
    Country(
        alpha2="GG", alpha3="GGY", name="Guernsey", name2="Guernsey",
        native_name="Guernsey", capital="St. Peter Port", numeric="831",
        continent="Europe", continent_code="EU",
        phones=(44,), currencies=("GBP",), languages=("en", "fr"),
        flag="🇬🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GG",
    ),
    Country(
        alpha2="GN", alpha3="GIN", name="Guinea", name2="Guinea",
        native_name="Guinée", capital="Conakry", numeric="324",
        continent="Africa", continent_code="AF",
        phones=(224,), currencies=("GNF",), languages=("fr", "ff"),
        flag="🇬🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GN",
    ),
    Country(
        alpha2="GW", alpha3="GNB", name="Guinea-Bissau", name2="Guinea-Bissau",
        native_name="Guiné-Bissau", capital="Bissau", numeric="624",
        continent="Africa", continent_code="AF",
        phones=(245,), currencies=("XOF",), languages=("pt",),
        flag="🇬🇼", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GW",
    ),
    Country(
        alpha2="GY", alpha3="GUY", name="Guyana", name2="Guyana",
        native_name="Guyana", capital="Georgetown", numeric="328",
        continent="South America", continent_code="SA",
        phones=(592,), currencies=("GYD",), languages=("en",),
        flag="🇬🇾", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GY",
    ),
    Country(
        alpha2="HT", alpha3="HTI", name="Haiti", name2="Haiti",
        native_name="Haïti", capital="Port-au-Prince", numeric="332",
        continent="North America", continent_code="NA",
        phones=(509,), currencies=("HTG", "USD"), languages=("fr", "ht"),
        flag="🇭🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:HT",
    ),
    Country(
        alpha2="HM", alpha3="HMD", name="Heard Island and McDonald Islands", name2="Heard Island and McDonald Islands",
        native_name="Heard Island and McDonald Islands", capital="", numeric="334",
        continent="Antarctica", continent_code="AN",
        phones=(61,), currencies=("AUD",), languages=("en",),
        flag="🇭🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:HM",
    ),
    Country(
        alpha2="VA", alpha3="VAT", name="Holy See", name2="Vatican City",
        native_name="Vaticano", capital="Vatican City", numeric="336",
        continent="Europe", continent_code="EU",
        phones=(379,), currencies=("EUR",), languages=("it", "la"),
        flag="🇻🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:VA",
    ),
    Country(
        alpha2="HN", alpha3="HND", name="Honduras", name2="Honduras",
        native_name="Honduras", capital="Tegucigalpa", numeric="340",
        continent="North America", continent_code="NA",
        phones=(504,), currencies=("HNL",), languages=("es",),
        flag="🇭🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:HN",
    ),
    Country(
        alpha2="HK", alpha3="HKG", name="Hong Kong", name2="Hong Kong",
        native_name="香港", capital="City of Victoria", numeric="344",
        continent="Asia", continent_code="AS",
        phones=(852,), currencies=("HKD",), languages=("zh", "en"),
        flag="🇭🇰", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:HK",
    ),
    Country(
        alpha2="HU", alpha3="HUN", name="Hungary", name2="Hungary",
        native_name="Magyarország", capital="Budapest", numeric="348",
        continent="Europe", continent_code="EU",
        phones=(36,), currencies=("HUF",), languages=("hu",),
        flag="🇭🇺", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:HU",
    ),
    Country(
        alpha2="IS", alpha3="ISL", name="Iceland", name2="Iceland",
        native_name="Ísland", capital="Reykjavik", numeric="352",
        continent="Europe", continent_code="EU",
        phones=(354,), currencies=("ISK",), languages=("is",),
        flag="🇮🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:IS",
    ),
    Country(
        alpha2="IN", alpha3="IND", name="India", name2="India",
        native_name="भारत", capital="New Delhi", numeric="356",
        continent="Asia", continent_code="AS",
        phones=(91,), currencies=("INR",), languages=("hi", "en"),
        flag="🇮🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:IN",
    ),
    Country(
        alpha2="ID", alpha3="IDN", name="Indonesia", name2="Indonesia",
        native_name="Indonesia", capital="Jakarta", numeric="360",
        continent="Asia", continent_code="AS",
        phones=(62,), currencies=("IDR",), languages=("id",),
        flag="🇮🇩", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:ID",
    ),
    Country(
        alpha2="IR", alpha3="IRN", name="Iran (Islamic Republic of)", name2="Iran",
        native_name="ایران", capital="Tehran", numeric="364",
        continent="Asia", continent_code="AS",
        phones=(98,), currencies=("IRR",), languages=("fa",),
        flag="🇮🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:IR",
    ),
    Country(
        alpha2="IQ", alpha3="IRQ", name="Iraq", name2="Iraq",
        native_name="العراق", capital="Baghdad", numeric="368",
        continent="Asia", continent_code="AS",
        phones=(964,), currencies=("IQD",), languages=("ar", "ku"),
        flag="🇮🇶", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:IQ",
    ),
    Country(
        alpha2="IE", alpha3="IRL", name="Ireland", name2="Ireland",
        native_name="Éire", capital="Dublin", numeric="372",
        continent="Europe", continent_code="EU",
        phones=(353,), currencies=("EUR",), languages=("ga", "en"),
        flag="🇮🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:IE",
    ),
    Country(
        alpha2="IM", alpha3="IMN", name="Isle of Man", name2="Isle of Man",
        native_name="Isle of Man", capital="Douglas", numeric="833",
        continent="Europe", continent_code="EU",
        phones=(44,), currencies=("GBP",), languages=("en", "gv"),
        flag="🇮🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:IM",
    ),
    Country(
        alpha2="IL", alpha3="ISR", name="Israel", name2="Israel",
        native_name="יִשְׂרָאֵל", capital="Jerusalem", numeric="376",
        continent="Asia", continent_code="AS",
        phones=(972,), currencies=("ILS",), languages=("he", "ar"),
        flag="🇮🇱", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:IL",
    ),
    Country(
        alpha2="IT", alpha3="ITA", name="Italy", name2="Italy",
        native_name="Italia", capital="Rome", numeric="380",
        continent="Europe", continent_code="EU",
        phones=(39,), currencies=("EUR",), languages=("it",),
        flag="🇮🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:IT",
    ),
    Country(
        alpha2="JM", alpha3="JAM", name="Jamaica", name2="Jamaica",
        native_name="Jamaica", capital="Kingston", numeric="388",
        continent="North America", continent_code="NA",
        phones=(1876,), currencies=("JMD",), languages=("en",),
        flag="🇯🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:JM",
    ),
    Country(
        alpha2="JP", alpha3="JPN", name="Japan", name2="Japan",
        native_name="日本", capital="Tokyo", numeric="392",
        continent="Asia", continent_code="AS",
        phones=(81,), currencies=("JPY",), languages=("ja",),
        flag="🇯🇵", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:JP",
    ),
    Country(
        alpha2="JE", alpha3="JEY", name="Jersey", name2="Jersey",
        native_name="Jersey", capital="Saint Helier", numeric="832",
        continent="Europe", continent_code="EU",
        phones=(44,), currencies=("GBP",), languages=("en", "fr"),
        flag="🇯🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:JE",
    ),
    Country(
        alpha2="JO", alpha3="JOR", name="Jordan", name2="Jordan",
        native_name="الأردن", capital="Amman", numeric="400",
        continent="Asia", continent_code="AS",
        phones=(962,), currencies=("JOD",), languages=("ar",),
        flag="🇯🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:JO",
    ),
    Country(
        alpha2="KZ", alpha3="KAZ", name="Kazakhstan", name2="Kazakhstan",
        native_name="Қазақстан", capital="Astana", numeric="398",
        continent="Asia", continent_code="AS",
        phones=(76, 77), currencies=("KZT",), languages=("kk", "ru"),
        flag="🇰🇿", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KZ",
    ),
    Country(
        alpha2="KE", alpha3="KEN", name="Kenya", name2="Kenya",
        native_name="Kenya", capital="Nairobi", numeric="404",
        continent="Africa", continent_code="AF",
        phones=(254,), currencies=("KES",), languages=("en", "sw"),
        flag="🇰🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KE",
    ),
    Country(
        alpha2="KI", alpha3="KIR", name="Kiribati", name2="Kiribati",
        native_name="Kiribati", capital="South Tarawa", numeric="296",
        continent="Oceania", continent_code="OC",
        phones=(686,), currencies=("AUD",), languages=("en",),
        flag="🇰🇮", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KI",
    ),
    Country(
        alpha2="KP", alpha3="PRK", name="Korea (Democratic People's Republic of)", name2="North Korea",
        native_name="북한", capital="Pyongyang", numeric="408",
        continent="Asia", continent_code="AS",
        phones=(850,), currencies=("KPW",), languages=("ko",),
        flag="🇰🇵", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KP",
    ),
    Country(
        alpha2="KR", alpha3="KOR", name="Korea, Republic of", name2="South Korea",
        native_name="대한민국", capital="Seoul", numeric="410",
        continent="Asia", continent_code="AS",
        phones=(82,), currencies=("KRW",), languages=("ko",),
        flag="🇰🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KR",
    ),
    Country(
        alpha2="KW", alpha3="KWT", name="Kuwait", name2="Kuwait",
        native_name="الكويت", capital="Kuwait City", numeric="414",
        continent="Asia", continent_code="AS",
        phones=(965,), currencies=("KWD",), languages=("ar",),
        flag="🇰🇼", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KW",
    ),
    Country(
        alpha2="KG", alpha3="KGZ", name="Kyrgyzstan", name2="Kyrgyzstan",
        native_name="Кыргызстан", capital="Bishkek", numeric="417",
        continent="Asia", continent_code="AS",
        phones=(996,), currencies=("KGS",), languages=("ky", "ru"),
        flag="🇰🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KG",
    ),
    Country(
        alpha2="LA", alpha3="LAO", name="Lao People's Democratic Republic", name2="Laos",
        native_name="ສປປລາວ", capital="Vientiane", numeric="418",
        continent="Asia", continent_code="AS",
        phones=(856,), currencies=("LAK",), languages=("lo",),
        flag="🇱🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LA",
    ),
    Country(
        alpha2="LV", alpha3="LVA", name="Latvia", name2="Latvia",
        native_name="Latvija", capital="Riga", numeric="428",
        continent="Europe", continent_code="EU",
        phones=(371,), currencies=("EUR",), languages=("lv",),
        flag="🇱🇻", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LV",
    ),
    Country(
        alpha2="LB", alpha3="LBN", name="Lebanon", name2="Lebanon",
        native_name="لبنان", capital="Beirut", numeric="422",
        continent="Asia", continent_code="AS",
        phones=(961,), currencies=("LBP",), languages=("ar", "fr"),
        flag="🇱🇧", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LB",
    ),
    Country(
        alpha2="LS", alpha3="LSO", name="Lesotho", name2="Lesotho",
        native_name="Lesotho", capital="Maseru", numeric="426",
        continent="Africa", continent_code="AF",
        phones=(266,), currencies=("LSL", "ZAR"), languages=("en", "st"),
        flag="🇱🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LS",
    ),
    Country(
        alpha2="LR", alpha3="LBR", name="Liberia", name2="Liberia",
        native_name="Liberia", capital="Monrovia", numeric="430",
        continent="Africa", continent_code="AF",
        phones=(231,), currencies=("LRD",), languages=("en",),
        flag="🇱🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LR",
    ),
    Country(
        alpha2="LY", alpha3="LBY", name="Libya", name2="Libya",
        native_name="‏ليبيا", capital="Tripoli", numeric="434",
        continent="Africa", continent_code="AF",
        phones=(218,), currencies=("LYD",), languages=("ar",),
        flag="🇱🇾", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LY",
    ),
    Country(
        alpha2="LI", alpha3="LIE", name="Liechtenstein", name2="Liechtenstein",
        native_name="Liechtenstein", capital="Vaduz", numeric="438",
        continent="Europe", continent_code="EU",
        phones=(423,), currencies=("CHF",), languages=("de",),
        flag="🇱🇮", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LI",
    ),
    Country(
        alpha2="LT", alpha3="LTU", name="Lithuania", name2="Lithuania",
        native_name="Lietuva", capital="Vilnius", numeric="440",
        continent="Europe", continent_code="EU",
        phones=(370,), currencies=("EUR",), languages=("lt",),
        flag="🇱🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LT",
    ),
    Country(
        alpha2="LU", alpha3="LUX", name="Luxembourg", name2="Luxembourg",
        native_name="Luxembourg", capital="Luxembourg", numeric="442",
        continent="Europe", continent_code="EU",
        phones=(352,), currencies=("EUR",), languages=("fr", "de", "lb"),
        flag="🇱🇺", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LU",
    ),
    Country(
        alpha2="MO", alpha3="MAC", name="Macao", name2="Macao",
        native_name="澳門", capital="", numeric="446",
        continent="Asia", continent_code="AS",
        phones=(853,), currencies=("MOP",), languages=("zh", "pt"),
        flag="🇲🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MO",
    ),
    Country(
        alpha2="MG", alpha3="MDG", name="Madagascar", name2="Madagascar",
        native_name="Madagasikara", capital="Antananarivo", numeric="450",
        continent="Africa", continent_code="AF",
        phones=(261,), currencies=("MGA",), languages=("fr", "mg"),
        flag="🇲🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MG",
    ),
    Country(
        alpha2="MW", alpha3="MWI", name="Malawi", name2="Malawi",
        native_name="Malawi", capital="Lilongwe", numeric="454",
        continent="Africa", continent_code="AF",
        phones=(265,), currencies=("MWK",), languages=("en", "ny"),
        flag="🇲🇼", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MW",
    ),
    Country(
        alpha2="MY", alpha3="MYS", name="Malaysia", name2="Malaysia",
        native_name="Malaysia", capital="Kuala Lumpur", numeric="458",
        continent="Asia", continent_code="AS",
        phones=(60,), currencies=("MYR",), languages=("ms",),
        flag="🇲🇾", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MY",
    ),
    Country(
        alpha2="MV", alpha3="MDV", name="Maldives", name2="Maldives",
        native_name="Maldives", capital="Malé", numeric="462",
        continent="Asia", continent_code="AS",
        phones=(960,), currencies=("MVR",), languages=("dv",),
        flag="🇲🇻", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MV",
    ),
    Country(
        alpha2="ML", alpha3="MLI", name="Mali", name2="Mali",
        native_name="Mali", capital="Bamako", numeric="466",
        continent="Africa", continent_code="AF",
        phones=(223,), currencies=("XOF",), languages=("fr",),
        flag="🇲🇱", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:ML",
    ),
    Country(
        alpha2="MT", alpha3="MLT", name="Malta", name2="Malta",
        native_name="Malta", capital="Valletta", numeric="470",
        continent="Europe", continent_code="EU",
        phones=(356,), currencies=("EUR",), languages=("mt", "en"),
        flag="🇲🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MT",
    ),
    Country(
        alpha2="MH", alpha3="MHL", name="Marshall Islands", name2="Marshall Islands",
        native_name="M̧ajeļ", capital="Majuro", numeric="584",
        continent="Oceania", continent_code="OC",
        phones=(692,), currencies=("USD",), languages=("en", "mh"),
        flag="🇲🇭", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MH",
    ),
    Country(
        alpha2="MQ", alpha3="MTQ", name="Martinique", name2="Martinique",
        native_name="Martinique", capital="Fort-de-France", numeric="474",
        continent="North America", continent_code="NA",
        phones=(596,), currencies=("EUR",), languages=("fr",),
        flag="🇲🇶", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MQ",
    ),
    Country(
        alpha2="MR", alpha3="MRT", name="Mauritania", name2="Mauritania",
        native_name="موريتانيا", capital="Nouakchott", numeric="478",
        continent="Africa", continent_code="AF",
        phones=(222,), currencies=("MRU",), languages=("ar",),
        flag="🇲🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MR",
    ),
    Country(
        alpha2="MU", alpha3="MUS", name="Mauritius", name2="Mauritius",
        native_name="Maurice", capital="Port Louis", numeric="480",
        continent="Africa", continent_code="AF",
        phones=(230,), currencies=("MUR",), languages=("en",),
        flag="🇲🇺", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MU",
    ),
    Country(
        alpha2="YT", alpha3="MYT", name="Mayotte", name2="Mayotte",
        native_name="Mayotte", capital="Mamoudzou", numeric="175",
        continent="Africa", continent_code="AF",
        phones=(262,), currencies=("EUR",), languages=("fr",),
        flag="🇾🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:YT",
    ),
    Country(
        alpha2="MX", alpha3="MEX", name="Mexico", name2="Mexico",
        native_name="México", capital="Mexico City", numeric="484",
        continent="North America", continent_code="NA",
        phones=(52,), currencies=("MXN",), languages=("es",),
        flag="🇲🇽", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MX",
    ),
    Country(
        alpha2="FM", alpha3="FSM", name="Micronesia (Federated States of)", name2="Micronesia",
        native_name="Micronesia", capital="Palikir", numeric="583",
        continent="Oceania", continent_code="OC",
        phones=(691,), currencies=("USD",), languages=("en",),
        flag="🇫🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:FM",
    ),
    Country(
        alpha2="MD", alpha3="MDA", name="Moldova, Republic of", name2="Moldova",
        native_name="Moldova", capital="Chișinău", numeric="498",
        continent="Europe", continent_code="EU",
        phones=(373,), currencies=("MDL",), languages=("ro",),
        flag="🇲🇩", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MD",
    ),
    Country(
        alpha2="MC", alpha3="MCO", name="Monaco", name2="Monaco",
        native_name="Monaco", capital="Monaco", numeric="492",
        continent="Europe", continent_code="EU",
        phones=(377,), currencies=("EUR",), languages=("fr",),
        flag="🇲🇨", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MC",
    ),
    Country(
        alpha2="MN", alpha3="MNG", name="Mongolia", name2="Mongolia",
        native_name="Монгол улс", capital="Ulan Bator", numeric="496",
        continent="Asia", continent_code="AS",
        phones=(976,), currencies=("MNT",), languages=("mn",),
        flag="🇲🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MN",
    ),
    Country(
        alpha2="ME", alpha3="MNE", name="Montenegro", name2="Montenegro",
        native_name="Црна Гора", capital="Podgorica", numeric="499",
        continent="Europe", continent_code="EU",
        phones=(382,), currencies=("EUR",), languages=("sr", "bs", "sq", "hr"),
        flag="🇲🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:ME",
    ),
    Country(
        alpha2="MS", alpha3="MSR", name="Montserrat", name2="Montserrat",
        native_name="Montserrat", capital="Plymouth", numeric="500",
        continent="North America", continent_code="NA",
        phones=(1664,), currencies=("XCD",), languages=("en",),
        flag="🇲🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MS",
    ),
    Country(
        alpha2="MA", alpha3="MAR", name="Morocco", name2="Morocco",
        native_name="المغرب", capital="Rabat", numeric="504",
        continent="Africa", continent_code="AF",
        phones=(212,), currencies=("MAD",), languages=("ar",),
        flag="🇲🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MA",
    ),
    Country(
        alpha2="MZ", alpha3="MOZ", name="Mozambique", name2="Mozambique",
        native_name="Moçambique", capital="Maputo", numeric="508",
        continent="Africa", continent_code="AF",
        phones=(258,), currencies=("MZN",), languages=("pt",),
        flag="🇲🇿", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MZ",
    ),
    Country(
        alpha2="MM", alpha3="MMR", name="Myanmar", name2="Myanmar (Burma)",
        native_name="မြန်မာ", capital="Naypyidaw", numeric="104",
        continent="Asia", continent_code="AS",
        phones=(95,), currencies=("MMK",), languages=("my",),
        flag="🇲🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MM",
    ),
    Country(
        alpha2="NA", alpha3="NAM", name="Namibia", name2="Namibia",
        native_name="Namibia", capital="Windhoek", numeric="516",
        continent="Africa", continent_code="AF",
        phones=(264,), currencies=("NAD", "ZAR"), languages=("en", "af"),
        flag="🇳🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NA",
    ),
    Country(
        alpha2="NR", alpha3="NRU", name="Nauru", name2="Nauru",
        native_name="Nauru", capital="Yaren", numeric="520",
        continent="Oceania", continent_code="OC",
        phones=(674,), currencies=("AUD",), languages=("en", "na"),
        flag="🇳🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NR",
    ),
    Country(
        alpha2="NP", alpha3="NPL", name="Nepal", name2="Nepal",
        native_name="नेपाल", capital="Kathmandu", numeric="524",
        continent="Asia", continent_code="AS",
        phones=(977,), currencies=("NPR",), languages=("ne",),
        flag="🇳🇵", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NP",
    ),
    Country(
        alpha2="NL", alpha3="NLD", name="Netherlands", name2="Netherlands",
        native_name="Nederland", capital="Amsterdam", numeric="528",
        continent="Europe", continent_code="EU",
        phones=(31,), currencies=("EUR",), languages=("nl",),
        flag="🇳🇱", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NL",
    ),
    Country(
        alpha2="NC", alpha3="NCL", name="New Caledonia", name2="New Caledonia",
        native_name="Nouvelle-Calédonie", capital="Nouméa", numeric="540",
        continent="Oceania", continent_code="OC",
        phones=(687,), currencies=("XPF",), languages=("fr",),
        flag="🇳🇨", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NC",
    ),
    Country(
        alpha2="NZ", alpha3="NZL", name="New Zealand", name2="New Zealand",
        native_name="New Zealand", capital="Wellington", numeric="554",
        continent="Oceania", continent_code="OC",
        phones=(64,), currencies=("NZD",), languages=("en", "mi"),
        flag="🇳🇿", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NZ",
    ),
    Country(
        alpha2="NI", alpha3="NIC", name="Nicaragua", name2="Nicaragua",
        native_name="Nicaragua", capital="Managua", numeric="558",
        continent="North America", continent_code="NA",
        phones=(505,), currencies=("NIO",), languages=("es",),
        flag="🇳🇮", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NI",
    ),
    Country(
        alpha2="NE", alpha3="NER", name="Niger", name2="Niger",
        native_name="Niger", capital="Niamey", numeric="562",
        continent="Africa", continent_code="AF",
        phones=(227,), currencies=("XOF",), languages=("fr",),
        flag="🇳🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NE",
    ),
    Country(
        alpha2="NG", alpha3="NGA", name="Nigeria", name2="Nigeria",
        native_name="Nigeria", capital="Abuja", numeric="566",
        continent="Africa", continent_code="AF",
        phones=(234,), currencies=("NGN",), languages=("en",),
        flag="🇳🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NG",
    ),
    Country(
        alpha2="NU", alpha3="NIU", name="Niue", name2="Niue",
        native_name="Niuē", capital="Alofi", numeric="570",
        continent="Oceania", continent_code="OC",
        phones=(683,), currencies=("NZD",), languages=("en",),
        flag="🇳🇺", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NU",
    ),
    Country(
        alpha2="NF", alpha3="NFK", name="Norfolk Island", name2="Norfolk Island",
        native_name="Norfolk Island", capital="Kingston", numeric="574",
        continent="Oceania", continent_code="OC",
        phones=(672,), currencies=("AUD",), languages=("en",),
        flag="🇳🇫", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NF",
    ),
    Country(
        alpha2="MK", alpha3="MKD", name="North Macedonia", name2="North Macedonia",
        native_name="Северна Македонија", capital="Skopje", numeric="807",
        continent="Europe", continent_code="EU",
        phones=(389,), currencies=("MKD",), languages=("mk",),
        flag="🇲🇰", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MK",
    ),
    Country(
        alpha2="MP", alpha3="MNP", name="Northern Mariana Islands", name2="Northern Mariana Islands",
        native_name="Northern Mariana Islands", capital="Saipan", numeric="580",
        continent="Oceania", continent_code="OC",
        phones=(1670,), currencies=("USD",), languages=("en", "ch"),
        flag="🇲🇵", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MP",
    ),
    Country(
        alpha2="NO", alpha3="NOR", name="Norway", name2="Norway",
        native_name="Norge", capital="Oslo", numeric="578",
        continent="Europe", continent_code="EU",
        phones=(47,), currencies=("NOK",), languages=("no", "nb", "nn"),
        flag="🇳🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:NO",
    ),
    Country(
        alpha2="OM", alpha3="OMN", name="Oman", name2="Oman",
        native_name="عمان", capital="Muscat", numeric="512",
        continent="Asia", continent_code="AS",
        phones=(968,), currencies=("OMR",), languages=("ar",),
        flag="🇴🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:OM",
    ),
    Country(
        alpha2="PK", alpha3="PAK", name="Pakistan", name2="Pakistan",
        native_name="Pakistan", capital="Islamabad", numeric="586",
        continent="Asia", continent_code="AS",
        phones=(92,), currencies=("PKR",), languages=("en", "ur"),
        flag="🇵🇰", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PK",
    ),
    Country(
        alpha2="PW", alpha3="PLW", name="Palau", name2="Palau",
        native_name="Palau", capital="Ngerulmud", numeric="585",
        continent="Oceania", continent_code="OC",
        phones=(680,), currencies=("USD",), languages=("en",),
        flag="🇵🇼", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PW",
    ),
    Country(
        alpha2="PS", alpha3="PSE", name="Palestine, State of", name2="Palestine",
        native_name="فلسطين", capital="Ramallah", numeric="275",
        continent="Asia", continent_code="AS",
        phones=(970,), currencies=("ILS",), languages=("ar",),
        flag="🇵🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PS",
    ),
    Country(
        alpha2="PA", alpha3="PAN", name="Panama", name2="Panama",
        native_name="Panamá", capital="Panama City", numeric="591",
        continent="North America", continent_code="NA",
        phones=(507,), currencies=("PAB", "USD"), languages=("es",),
        flag="🇵🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PA",
    ),
    Country(
        alpha2="PG", alpha3="PNG", name="Papua New Guinea", name2="Papua New Guinea",
        native_name="Papua Niugini", capital="Port Moresby", numeric="598",
        continent="Oceania", continent_code="OC",
        phones=(675,), currencies=("PGK",), languages=("en",),
        flag="🇵🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PG",
    ),
    Country(
        alpha2="PY", alpha3="PRY", name="Paraguay", name2="Paraguay",
        native_name="Paraguay", capital="Asunción", numeric="600",
        continent="South America", continent_code="SA",
        phones=(595,), currencies=("PYG",), languages=("es", "gn"),
        flag="🇵🇾", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PY",
    ),
    Country(
        alpha2="PE", alpha3="PER", name="Peru", name2="Peru",
        native_name="Perú", capital="Lima", numeric="604",
        continent="South America", continent_code="SA",
        phones=(51,), currencies=("PEN",), languages=("es",),
        flag="🇵🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PE",
    ),
    Country(
        alpha2="PH", alpha3="PHL", name="Philippines", name2="Philippines",
        native_name="Pilipinas", capital="Manila", numeric="608",
        continent="Asia", continent_code="AS",
        phones=(63,), currencies=("PHP",), languages=("en",),
        flag="🇵🇭", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PH",
    ),
    Country(
        alpha2="PN", alpha3="PCN", name="Pitcairn", name2="Pitcairn Islands",
        native_name="Pitcairn Islands", capital="Adamstown", numeric="612",
        continent="Oceania", continent_code="OC",
        phones=(64,), currencies=("NZD",), languages=("en",),
        flag="🇵🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PN",
    ),
    Country(
        alpha2="PL", alpha3="POL", name="Poland", name2="Poland",
        native_name="Polska", capital="Warsaw", numeric="616",
        continent="Europe", continent_code="EU",
        phones=(48,), currencies=("PLN",), languages=("pl",),
        flag="🇵🇱", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PL",
    ),
    Country(
        alpha2="PT", alpha3="PRT", name="Portugal", name2="Portugal",
        native_name="Portugal", capital="Lisbon", numeric="620",
        continent="Europe", continent_code="EU",
        phones=(351,), currencies=("EUR",), languages=("pt",),
        flag="🇵🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PT",
    ),
    Country(
        alpha2="PR", alpha3="PRI", name="Puerto Rico", name2="Puerto Rico",
        native_name="Puerto Rico", capital="San Juan", numeric="630",
        continent="North America", continent_code="NA",
        phones=(1787, 1939), currencies=("USD",), languages=("es", "en"),
        flag="🇵🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PR",
    ),
    Country(
        alpha2="QA", alpha3="QAT", name="Qatar", name2="Qatar",
        native_name="قطر", capital="Doha", numeric="634",
        continent="Asia", continent_code="AS",
        phones=(974,), currencies=("QAR",), languages=("ar",),
        flag="🇶🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:QA",
    ),
    Country(
        alpha2="RE", alpha3="REU", name="Réunion", name2="Reunion",
        native_name="La Réunion", capital="Saint-Denis", numeric="638",
        continent="Africa", continent_code="AF",
        phones=(262,), currencies=("EUR",), languages=("fr",),
        flag="🇷🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:RE",
    ),
    Country(
        alpha2="RO", alpha3="ROU", name="Romania", name2="Romania",
        native_name="România", capital="Bucharest", numeric="642",
        continent="Europe", continent_code="EU",
        phones=(40,), currencies=("RON",), languages=("ro",),
        flag="🇷🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:RO",
    ),
    Country(
        alpha2="RU", alpha3="RUS", name="Russian Federation", name2="Russia",
        native_name="Россия", capital="Moscow", numeric="643",
        continent="Europe", continent_code="EU",
        phones=(7,), currencies=("RUB",), languages=("ru",),
        flag="🇷🇺", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:RU",
    ),
    Country(
        alpha2="RW", alpha3="RWA", name="Rwanda", name2="Rwanda",
        native_name="Rwanda", capital="Kigali", numeric="646",
        continent="Africa", continent_code="AF",
        phones=(250,), currencies=("RWF",), languages=("rw", "en", "fr"),
        flag="🇷🇼", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:RW",
    ),
    Country(
        alpha2="BL", alpha3="BLM", name="Saint Barthélemy", name2="Saint Barthelemy",
        native_name="Saint-Barthélemy", capital="Gustavia", numeric="652",
        continent="North America", continent_code="NA",
        phones=(590,), currencies=("EUR",), languages=("fr",),
        flag="🇧🇱", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:BL",
    ),
    Country(
        alpha2="SH", alpha3="SHN", name="Saint Helena, Ascension and Tristan da Cunha", name2="Saint Helena",
        native_name="Saint Helena", capital="Jamestown", numeric="654",
        continent="Africa", continent_code="AF",
        phones=(290,), currencies=("SHP",), languages=("en",),
        flag="🇸🇭", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SH",
    ),
    Country(
        alpha2="KN", alpha3="KNA", name="Saint Kitts and Nevis", name2="Saint Kitts and Nevis",
        native_name="Saint Kitts and Nevis", capital="Basseterre", numeric="659",
        continent="North America", continent_code="NA",
        phones=(1869,), currencies=("XCD",), languages=("en",),
        flag="🇰🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:KN",
    ),
    Country(
        alpha2="LC", alpha3="LCA", name="Saint Lucia", name2="Saint Lucia",
        native_name="Saint Lucia", capital="Castries", numeric="662",
        continent="North America", continent_code="NA",
        phones=(1758,), currencies=("XCD",), languages=("en",),
        flag="🇱🇨", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LC",
    ),
    Country(
        alpha2="MF", alpha3="MAF", name="Saint Martin (French part)", name2="Saint Martin",
        native_name="Saint-Martin", capital="Marigot", numeric="663",
        continent="North America", continent_code="NA",
        phones=(590,), currencies=("EUR",), languages=("en", "fr", "nl"),
        flag="🇲🇫", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:MF",
    ),
    Country(
        alpha2="PM", alpha3="SPM", name="Saint Pierre and Miquelon", name2="Saint Pierre and Miquelon",
        native_name="Saint-Pierre-et-Miquelon", capital="Saint-Pierre", numeric="666",
        continent="North America", continent_code="NA",
        phones=(508,), currencies=("EUR",), languages=("fr",),
        flag="🇵🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:PM",
    ),
    Country(
        alpha2="VC", alpha3="VCT", name="Saint Vincent and the Grenadines", name2="Saint Vincent and the Grenadines",
        native_name="Saint Vincent and the Grenadines", capital="Kingstown", numeric="670",
        continent="North America", continent_code="NA",
        phones=(1784,), currencies=("XCD",), languages=("en",),
        flag="🇻🇨", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:VC",
    ),
    Country(
        alpha2="WS", alpha3="WSM", name="Samoa", name2="Samoa",
        native_name="Samoa", capital="Apia", numeric="882",
        continent="Oceania", continent_code="OC",
        phones=(685,), currencies=("WST",), languages=("sm", "en"),
        flag="🇼🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:WS",
    ),
    Country(
        alpha2="SM", alpha3="SMR", name="San Marino", name2="San Marino",
        native_name="San Marino", capital="City of San Marino", numeric="674",
        continent="Europe", continent_code="EU",
        phones=(378,), currencies=("EUR",), languages=("it",),
        flag="🇸🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SM",
    ),
    Country(
        alpha2="ST", alpha3="STP", name="Sao Tome and Principe", name2="Sao Tome and Principe",
        native_name="São Tomé e Príncipe", capital="São Tomé", numeric="678",
        continent="Africa", continent_code="AF",
        phones=(239,), currencies=("STN",), languages=("pt",),
        flag="🇸🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:ST",
    ),
    Country(
        alpha2="SA", alpha3="SAU", name="Saudi Arabia", name2="Saudi Arabia",
        native_name="العربية السعودية", capital="Riyadh", numeric="682",
        continent="Asia", continent_code="AS",
        phones=(966,), currencies=("SAR",), languages=("ar",),
        flag="🇸🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SA",
    ),
    Country(
        alpha2="SN", alpha3="SEN", name="Senegal", name2="Senegal",
        native_name="Sénégal", capital="Dakar", numeric="686",
        continent="Africa", continent_code="AF",
        phones=(221,), currencies=("XOF",), languages=("fr",),
        flag="🇸🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SN",
    ),
    Country(
        alpha2="RS", alpha3="SRB", name="Serbia", name2="Serbia",
        native_name="Србија", capital="Belgrade", numeric="688",
        continent="Europe", continent_code="EU",
        phones=(381,), currencies=("RSD",), languages=("sr",),
        flag="🇷🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:RS",
    ),
    Country(
        alpha2="SC", alpha3="SYC", name="Seychelles", name2="Seychelles",
        native_name="Seychelles", capital="Victoria", numeric="690",
        continent="Africa", continent_code="AF",
        phones=(248,), currencies=("SCR",), languages=("fr", "en"),
        flag="🇸🇨", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SC",
    ),
    Country(
        alpha2="SL", alpha3="SLE", name="Sierra Leone", name2="Sierra Leone",
        native_name="Sierra Leone", capital="Freetown", numeric="694",
        continent="Africa", continent_code="AF",
        phones=(232,), currencies=("SLL",), languages=("en",),
        flag="🇸🇱", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SL",
    ),
    Country(
        alpha2="SG", alpha3="SGP", name="Singapore", name2="Singapore",
        native_name="Singapore", capital="Singapore", numeric="702",
        continent="Asia", continent_code="AS",
        phones=(65,), currencies=("SGD",), languages=("en", "ms", "ta", "zh"),
        flag="🇸🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SG",
    ),
    Country(
        alpha2="SX", alpha3="SXM", name="Sint Maarten (Dutch part)", name2="Sint Maarten",
        native_name="Sint Maarten", capital="Philipsburg", numeric="534",
        continent="North America", continent_code="NA",
        phones=(1721,), currencies=("ANG",), languages=("nl", "en"),
        flag="🇸🇽", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SX",
    ),
    Country(
        alpha2="SK", alpha3="SVK", name="Slovakia", name2="Slovakia",
        native_name="Slovensko", capital="Bratislava", numeric="703",
        continent="Europe", continent_code="EU",
        phones=(421,), currencies=("EUR",), languages=("sk",),
        flag="🇸🇰", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SK",
    ),
    Country(
        alpha2="SI", alpha3="SVN", name="Slovenia", name2="Slovenia",
        native_name="Slovenija", capital="Ljubljana", numeric="705",
        continent="Europe", continent_code="EU",
        phones=(386,), currencies=("EUR",), languages=("sl",),
        flag="🇸🇮", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SI",
    ),
    Country(
        alpha2="SB", alpha3="SLB", name="Solomon Islands", name2="Solomon Islands",
        native_name="Solomon Islands", capital="Honiara", numeric="090",
        continent="Oceania", continent_code="OC",
        phones=(677,), currencies=("SBD",), languages=("en",),
        flag="🇸🇧", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SB",
    ),
    Country(
        alpha2="SO", alpha3="SOM", name="Somalia", name2="Somalia",
        native_name="Soomaaliya", capital="Mogadishu", numeric="706",
        continent="Africa", continent_code="AF",
        phones=(252,), currencies=("SOS",), languages=("so", "ar"),
        flag="🇸🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SO",
    ),
    Country(
        alpha2="ZA", alpha3="ZAF", name="South Africa", name2="South Africa",
        native_name="South Africa", capital="Pretoria", numeric="710",
        continent="Africa", continent_code="AF",
        phones=(27,), currencies=("ZAR",), languages=("af", "en", "nr", "st", "ss", "tn", "ts", "ve", "xh", "zu"),
        flag="🇿🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:ZA",
    ),
    Country(
        alpha2="GS", alpha3="SGS", name="South Georgia and the South Sandwich Islands", name2="South Georgia and the South Sandwich Islands",
        native_name="South Georgia", capital="King Edward Point", numeric="239",
        continent="Antarctica", continent_code="AN",
        phones=(500,), currencies=("GBP",), languages=("en",),
        flag="🇬🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GS",
    ),
    Country(
        alpha2="SS", alpha3="SSD", name="South Sudan", name2="South Sudan",
        native_name="South Sudan", capital="Juba", numeric="728",
        continent="Africa", continent_code="AF",
        phones=(211,), currencies=("SSP",), languages=("en",),
        flag="🇸🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SS",
    ),
    Country(
        alpha2="ES", alpha3="ESP", name="Spain", name2="Spain",
        native_name="España", capital="Madrid", numeric="724",
        continent="Europe", continent_code="EU",
        phones=(34,), currencies=("EUR",), languages=("es", "eu", "ca", "gl", "oc"),
        flag="🇪🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:ES",
    ),
    Country(
        alpha2="LK", alpha3="LKA", name="Sri Lanka", name2="Sri Lanka",
        native_name="śrī laṃkāva", capital="Colombo", numeric="144",
        continent="Asia", continent_code="AS",
        phones=(94,), currencies=("LKR",), languages=("si", "ta"),
        flag="🇱🇰", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:LK",
    ),
    Country(
        alpha2="SD", alpha3="SDN", name="Sudan", name2="Sudan",
        native_name="السودان", capital="Khartoum", numeric="729",
        continent="Africa", continent_code="AF",
        phones=(249,), currencies=("SDG",), languages=("ar", "en"),
        flag="🇸🇩", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SD",
    ),
    Country(
        alpha2="SR", alpha3="SUR", name="Suriname", name2="Suriname",
        native_name="Suriname", capital="Paramaribo", numeric="740",
        continent="South America", continent_code="SA",
        phones=(597,), currencies=("SRD",), languages=("nl",),
        flag="🇸🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SR",
    ),
    Country(
        alpha2="SJ", alpha3="SJM", name="Svalbard and Jan Mayen", name2="Svalbard and Jan Mayen",
        native_name="Svalbard og Jan Mayen", capital="Longyearbyen", numeric="744",
        continent="Europe", continent_code="EU",
        phones=(4779,), currencies=("NOK",), languages=("no",),
        flag="🇸🇯", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SJ",
    ),
    Country(
        alpha2="SE", alpha3="SWE", name="Sweden", name2="Sweden",
        native_name="Sverige", capital="Stockholm", numeric="752",
        continent="Europe", continent_code="EU",
        phones=(46,), currencies=("SEK",), languages=("sv",),
        flag="🇸🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SE",
    ),
    Country(
        alpha2="CH", alpha3="CHE", name="Switzerland", name2="Switzerland",
        native_name="Schweiz", capital="Bern", numeric="756",
        continent="Europe", continent_code="EU",
        phones=(41,), currencies=("CHE", "CHF", "CHW"), languages=("de", "fr", "it"),
        flag="🇨🇭", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:CH",
    ),
    Country(
        alpha2="SY", alpha3="SYR", name="Syrian Arab Republic", name2="Syria",
        native_name="سوريا", capital="Damascus", numeric="760",
        continent="Asia", continent_code="AS",
        phones=(963,), currencies=("SYP",), languages=("ar",),
        flag="🇸🇾", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:SY",
    ),
    Country(
        alpha2="TW", alpha3="TWN", name="Taiwan, Province of China", name2="Taiwan",
        native_name="臺灣", capital="Taipei", numeric="158",
        continent="Asia", continent_code="AS",
        phones=(886,), currencies=("TWD",), languages=("zh",),
        flag="🇹🇼", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TW",
    ),
    Country(
        alpha2="TJ", alpha3="TJK", name="Tajikistan", name2="Tajikistan",
        native_name="Тоҷикистон", capital="Dushanbe", numeric="762",
        continent="Asia", continent_code="AS",
        phones=(992,), currencies=("TJS",), languages=("tg", "ru"),
        flag="🇹🇯", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TJ",
    ),
    Country(
        alpha2="TZ", alpha3="TZA", name="Tanzania, United Republic of", name2="Tanzania",
        native_name="Tanzania", capital="Dodoma", numeric="834",
        continent="Africa", continent_code="AF",
        phones=(255,), currencies=("TZS",), languages=("sw", "en"),
        flag="🇹🇿", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TZ",
    ),
    Country(
        alpha2="TH", alpha3="THA", name="Thailand", name2="Thailand",
        native_name="ประเทศไทย", capital="Bangkok", numeric="764",
        continent="Asia", continent_code="AS",
        phones=(66,), currencies=("THB",), languages=("th",),
        flag="🇹🇭", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TH",
    ),
    Country(
        alpha2="TL", alpha3="TLS", name="Timor-Leste", name2="East Timor",
        native_name="Timor-Leste", capital="Dili", numeric="626",
        continent="Oceania", continent_code="OC",
        phones=(670,), currencies=("USD",), languages=("pt",),
        flag="🇹🇱", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TL",
    ),
    Country(
        alpha2="TG", alpha3="TGO", name="Togo", name2="Togo",
        native_name="Togo", capital="Lomé", numeric="768",
        continent="Africa", continent_code="AF",
        phones=(228,), currencies=("XOF",), languages=("fr",),
        flag="🇹🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TG",
    ),
    Country(
        alpha2="TK", alpha3="TKL", name="Tokelau", name2="Tokelau",
        native_name="Tokelau", capital="Fakaofo", numeric="772",
        continent="Oceania", continent_code="OC",
        phones=(690,), currencies=("NZD",), languages=("en",),
        flag="🇹🇰", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TK",
    ),
    Country(
        alpha2="TO", alpha3="TON", name="Tonga", name2="Tonga",
        native_name="Tonga", capital="Nuku'alofa", numeric="776",
        continent="Oceania", continent_code="OC",
        phones=(676,), currencies=("TOP",), languages=("en", "to"),
        flag="🇹🇴", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TO",
    ),
    Country(
        alpha2="TT", alpha3="TTO", name="Trinidad and Tobago", name2="Trinidad and Tobago",
        native_name="Trinidad and Tobago", capital="Port of Spain", numeric="780",
        continent="North America", continent_code="NA",
        phones=(1868,), currencies=("TTD",), languages=("en",),
        flag="🇹🇹", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TT",
    ),
    Country(
        alpha2="TN", alpha3="TUN", name="Tunisia", name2="Tunisia",
        native_name="تونس", capital="Tunis", numeric="788",
        continent="Africa", continent_code="AF",
        phones=(216,), currencies=("TND",), languages=("ar",),
        flag="🇹🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TN",
    ),
    Country(
        alpha2="TR", alpha3="TUR", name="Turkey", name2="Turkey",
        native_name="Türkiye", capital="Ankara", numeric="792",
        continent="Asia", continent_code="AS",
        phones=(90,), currencies=("TRY",), languages=("tr",),
        flag="🇹🇷", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TR",
    ),
    Country(
        alpha2="TM", alpha3="TKM", name="Turkmenistan", name2="Turkmenistan",
        native_name="Türkmenistan", capital="Ashgabat", numeric="795",
        continent="Asia", continent_code="AS",
        phones=(993,), currencies=("TMT",), languages=("tk", "ru"),
        flag="🇹🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TM",
    ),
    Country(
        alpha2="TC", alpha3="TCA", name="Turks and Caicos Islands", name2="Turks and Caicos Islands",
        native_name="Turks and Caicos Islands", capital="Cockburn Town", numeric="796",
        continent="North America", continent_code="NA",
        phones=(1649,), currencies=("USD",), languages=("en",),
        flag="🇹🇨", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TC",
    ),
    Country(
        alpha2="TV", alpha3="TUV", name="Tuvalu", name2="Tuvalu",
        native_name="Tuvalu", capital="Funafuti", numeric="798",
        continent="Oceania", continent_code="OC",
        phones=(688,), currencies=("AUD",), languages=("en",),
        flag="🇹🇻", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:TV",
    ),
    Country(
        alpha2="UG", alpha3="UGA", name="Uganda", name2="Uganda",
        native_name="Uganda", capital="Kampala", numeric="800",
        continent="Africa", continent_code="AF",
        phones=(256,), currencies=("UGX",), languages=("en", "sw"),
        flag="🇺🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:UG",
    ),
    Country(
        alpha2="UA", alpha3="UKR", name="Ukraine", name2="Ukraine",
        native_name="Україна", capital="Kyiv", numeric="804",
        continent="Europe", continent_code="EU",
        phones=(380,), currencies=("UAH",), languages=("uk",),
        flag="🇺🇦", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:UA",
    ),
    Country(
        alpha2="AE", alpha3="ARE", name="United Arab Emirates", name2="United Arab Emirates",
        native_name="دولة الإمارات العربية المتحدة", capital="Abu Dhabi", numeric="784",
        continent="Asia", continent_code="AS",
        phones=(971,), currencies=("AED",), languages=("ar",),
        flag="🇦🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:AE",
    ),
    Country(
        alpha2="GB", alpha3="GBR", name="United Kingdom of Great Britain and Northern Ireland", name2="United Kingdom",
        native_name="United Kingdom", capital="London", numeric="826",
        continent="Europe", continent_code="EU",
        phones=(44,), currencies=("GBP",), languages=("en",),
        flag="🇬🇧", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:GB",
    ),
    Country(
        alpha2="US", alpha3="USA", name="United States of America", name2="United States",
        native_name="United States", capital="Washington D.C.", numeric="840",
        continent="North America", continent_code="NA",
        phones=(1,), currencies=("USD", "USN", "USS"), languages=("en",),
        flag="🇺🇸", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:US",
    ),
    Country(
        alpha2="UM", alpha3="UMI", name="United States Minor Outlying Islands", name2="U.S. Minor Outlying Islands",
        native_name="United States Minor Outlying Islands", capital="", numeric="581",
        continent="Oceania", continent_code="OC",
        phones=(1,), currencies=("USD",), languages=("en",),
        flag="🇺🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:UM",
    ),
    Country(
        alpha2="UY", alpha3="URY", name="Uruguay", name2="Uruguay",
        native_name="Uruguay", capital="Montevideo", numeric="858",
        continent="South America", continent_code="SA",
        phones=(598,), currencies=("UYI", "UYU"), languages=("es",),
        flag="🇺🇾", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:UY",
    ),
    Country(
        alpha2="UZ", alpha3="UZB", name="Uzbekistan", name2="Uzbekistan",
        native_name="O‘zbekiston", capital="Tashkent", numeric="860",
        continent="Asia", continent_code="AS",
        phones=(998,), currencies=("UZS",), languages=("uz", "ru"),
        flag="🇺🇿", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:UZ",
    ),
    Country(
        alpha2="VU", alpha3="VUT", name="Vanuatu", name2="Vanuatu",
        native_name="Vanuatu", capital="Port Vila", numeric="548",
        continent="Oceania", continent_code="OC",
        phones=(678,), currencies=("VUV",), languages=("bi", "en", "fr"),
        flag="🇻🇺", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:VU",
    ),
    Country(
        alpha2="VE", alpha3="VEN", name="Venezuela (Bolivarian Republic of)", name2="Venezuela",
        native_name="Venezuela", capital="Caracas", numeric="862",
        continent="South America", continent_code="SA",
        phones=(58,), currencies=("VES",), languages=("es",),
        flag="🇻🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:VE",
    ),
    Country(
        alpha2="VN", alpha3="VNM", name="Viet Nam", name2="Vietnam",
        native_name="Việt Nam", capital="Hanoi", numeric="704",
        continent="Asia", continent_code="AS",
        phones=(84,), currencies=("VND",), languages=("vi",),
        flag="🇻🇳", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:VN",
    ),
    Country(
        alpha2="VG", alpha3="VGB", name="Virgin Islands (British)", name2="British Virgin Islands",
        native_name="British Virgin Islands", capital="Road Town", numeric="092",
        continent="North America", continent_code="NA",
        phones=(1284,), currencies=("USD",), languages=("en",),
        flag="🇻🇬", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:VG",
    ),
    Country(
        alpha2="VI", alpha3="VIR", name="Virgin Islands (U.S.)", name2="U.S. Virgin Islands",
        native_name="United States Virgin Islands", capital="Charlotte Amalie", numeric="850",
        continent="North America", continent_code="NA",
        phones=(1340,), currencies=("USD",), languages=("en",),
        flag="🇻🇮", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:VI",
    ),
    Country(
        alpha2="WF", alpha3="WLF", name="Wallis and Futuna", name2="Wallis and Futuna",
        native_name="Wallis et Futuna", capital="Mata-Utu", numeric="876",
        continent="Oceania", continent_code="OC",
        phones=(681,), currencies=("XPF",), languages=("fr",),
        flag="🇼🇫", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:WF",
    ),
    Country(
        alpha2="EH", alpha3="ESH", name="Western Sahara", name2="Western Sahara",
        native_name="الصحراء الغربية", capital="El Aaiún", numeric="732",
        continent="Africa", continent_code="AF",
        phones=(212,), currencies=("MAD", "DZD", "MRU"), languages=("es",),
        flag="🇪🇭", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:EH",
    ),
    Country(
        alpha2="YE", alpha3="YEM", name="Yemen", name2="Yemen",
        native_name="اليَمَن", capital="Sana'a", numeric="887",
        continent="Asia", continent_code="AS",
        phones=(967,), currencies=("YER",), languages=("ar",),
        flag="🇾🇪", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:YE",
    ),
    Country(
        alpha2="ZM", alpha3="ZMB", name="Zambia", name2="Zambia",
        native_name="Zambia", capital="Lusaka", numeric="894",
        continent="Africa", continent_code="AF",
        phones=(260,), currencies=("ZMW",), languages=("en",),
        flag="🇿🇲", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:ZM",
    ),
    Country(
        alpha2="ZW", alpha3="ZWE", name="Zimbabwe", name2="Zimbabwe",
        native_name="Zimbabwe", capital="Harare", numeric="716",
        continent="Africa", continent_code="AF",
        phones=(263,), currencies=("USD", "ZAR", "BWP", "GBP", "AUD", "CNY", "INR", "JPY"), languages=("en", "sn", "nd"),
        flag="🇿🇼", wiki="https://en.wikipedia.org/wiki/ISO_3166-2:ZW",
    ),
)
