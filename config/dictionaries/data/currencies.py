# -*- coding: utf-8 -*-
# config/dictionaries/data/currencies.py
"""ISO 4217 currency table. Order is the catalog order."""

from config.dictionaries.models import Currency


CURRENCIES: tuple[Currency, ...] = (
    Currency(alpha3="AED", name="United Arab Emirates dirham", numeric="784", minor_unit=2),
    Currency(alpha3="AFN", name="Afghan afghani", numeric="971", minor_unit=2),
    Currency(alpha3="ALL", name="Albanian lek", numeric="8", minor_unit=2),
    Currency(alpha3="AMD", name="Armenian dram", numeric="51", minor_unit=2),
    Currency(alpha3="ANG", name="Netherlands Antillean guilder", numeric="532", minor_unit=2),
    Currency(alpha3="AOA", name="Angolan kwanza", numeric="973", minor_unit=2),
    Currency(alpha3="ARS", name="Argentine peso", numeric="32", minor_unit=2),
    Currency(alpha3="AUD", name="Australian dollar", numeric="36", minor_unit=2),
    Currency(alpha3="AWG", name="Aruban florin", numeric="533", minor_unit=2),
    Currency(alpha3="AZN", name="Azerbaijani manat", numeric="944", minor_unit=2),
    Currency(alpha3="BAM", name="Bosnia and Herzegovina convertible mark", numeric="977", minor_unit=2),
    Currency(alpha3="BBD", name="Barbados dollar", numeric="52", minor_unit=2),
    Currency(alpha3="BDT", name="Bangladeshi taka", numeric="50", minor_unit=2),
    Currency(alpha3="BGN", name="Bulgarian lev", numeric="975", minor_unit=2),
    Currency(alpha3="BHD", name="Bahraini dinar", numeric="48", minor_unit=3),
    Currency(alpha3="BIF", name="Burundian franc", numeric="108", minor_unit=0),
    Currency(alpha3="BMD", name="Bermudian dollar (customarily known as Bermuda dollar)", numeric="60", minor_unit=2),
    Currency(alpha3="BND", name="Brunei dollar", numeric="96", minor_unit=2),
    Currency(alpha3="BOB", name="Boliviano", numeric="68", minor_unit=2),
    Currency(alpha3="BOV", name="Bolivian Mvdol (funds code)", numeric="984", minor_unit=2),
    Currency(alpha3="BRL", name="Brazilian real", numeric="986", minor_unit=2),
    Currency(alpha3="BSD", name="Bahamian dollar", numeric="44", minor_unit=2),
    Currency(alpha3="BTN", name="Bhutanese ngultrum", numeric="64", minor_unit=2),
    Currency(alpha3="BWP", name="Botswana pula", numeric="72", minor_unit=2),
    Currency(alpha3="BYN", name="Belarusian ruble (2016)", numeric="933", minor_unit=2),
    Currency(alpha3="BYR", name="Belarusian ruble", numeric="974", minor_unit=0),
    Currency(alpha3="BZD", name="Belize dollar", numeric="84", minor_unit=2),
    Currency(alpha3="CAD", name="Canadian dollar", numeric="124", minor_unit=2),
    Currency(alpha3="CDF", name="Congolese franc", numeric="976", minor_unit=2),
    Currency(alpha3="CHE", name="WIR Euro (complementary currency)", numeric="947", minor_unit=2),
    Currency(alpha3="CHF", name="Swiss franc", numeric="756", minor_unit=2),
    Currency(alpha3="CHW", name="WIR Franc (complementary currency)", numeric="948", minor_unit=2),
    Currency(alpha3="CLF", name="Unidad de Fomento (funds code)", numeric="990", minor_unit=0),
    Currency(alpha3="CLP", name="Chilean peso", numeric="152", minor_unit=0),
    Currency(alpha3="CNY", name="Chinese yuan", numeric="156", minor_unit=2),
    Currency(alpha3="COP", name="Colombian peso", numeric="170", minor_unit=2),
    Currency(alpha3="COU", name="Unidad de Valor Real", numeric="970", minor_unit=2),
    Currency(alpha3="CRC", name="Costa Rican colon", numeric="188", minor_unit=2),
    Currency(alpha3="CUC", name="Cuban convertible peso", numeric="931", minor_unit=2),
    Currency(alpha3="CUP", name="Cuban peso", numeric="192", minor_unit=2),
    Currency(alpha3="CVE", name="Cape Verde escudo", numeric="132", minor_unit=0),
    Currency(alpha3="CZK", name="Czech koruna", numeric="203", minor_unit=2),
    Currency(alpha3="DJF", name="Djiboutian franc", numeric="262", minor_unit=0),
    Currency(alpha3="DKK", name="Danish krone", numeric="208", minor_unit=2),
    Currency(alpha3="DOP", name="Dominican peso", numeric="214", minor_unit=2),
    Currency(alpha3="DZD", name="Algerian dinar", numeric="12", minor_unit=2),
    Currency(alpha3="EGP", name="Egyptian pound", numeric="818", minor_unit=2),
    Currency(alpha3="ERN", name="Eritrean nakfa", numeric="232", minor_unit=2),
    Currency(alpha3="ETB", name="Ethiopian birr", numeric="230", minor_unit=2),
    Currency(alpha3="EUR", name="Euro", numeric="978", minor_unit=2),
    Currency(alpha3="FJD", name="Fiji dollar", numeric="242", minor_unit=2),
    Currency(alpha3="FKP", name="Falkland Islands pound", numeric="238", minor_unit=2),
    Currency(alpha3="GBP", name="Pound sterling", numeric="826", minor_unit=2),
    Currency(alpha3="GEL", name="Georgian lari", numeric="981", minor_unit=2),
    Currency(alpha3="GHS", name="Ghanaian cedi", numeric="936", minor_unit=2),
    Currency(alpha3="GIP", name="Gibraltar pound", numeric="292", minor_unit=2),
    Currency(alpha3="GMD", name="Gambian dalasi", numeric="270", minor_unit=2),
    Currency(alpha3="GNF", name="Guinean franc", numeric="324", minor_unit=0),
    Currency(alpha3="GTQ", name="Guatemalan quetzal", numeric="320", minor_unit=2),
    Currency(alpha3="GYD", name="Guyanese dollar", numeric="328", minor_unit=2),
    Currency(alpha3="HKD", name="Hong Kong dollar", numeric="344", minor_unit=2),
    Currency(alpha3="HNL", name="Honduran lempira", numeric="340", minor_unit=2),
    Currency(alpha3="HRK", name="Croatian kuna", numeric="191", minor_unit=2),
    Currency(alpha3="HTG", name="Haitian gourde", numeric="332", minor_unit=2),
    Currency(alpha3="HUF", name="Hungarian forint", numeric="348", minor_unit=2),
    Currency(alpha3="IDR", name="Indonesian rupiah", numeric="360", minor_unit=2),
    Currency(alpha3="ILS", name="Israeli new shekel", numeric="376", minor_unit=2),
    Currency(alpha3="INR", name="Indian rupee", numeric="356", minor_unit=2),
    Currency(alpha3="IQD", name="Iraqi dinar", numeric="368", minor_unit=3),
    Currency(alpha3="IRR", name="Iranian rial", numeric="364", minor_unit=0),
    Currency(alpha3="ISK", name="Icelandic króna", numeric="352", minor_unit=0),
    Currency(alpha3="JMD", name="Jamaican dollar", numeric="388", minor_unit=2),
    Currency(alpha3="JOD", name="Jordanian dinar", numeric="400", minor_unit=3),
    Currency(alpha3="JPY", name="Japanese yen", numeric="392", minor_unit=0),
    Currency(alpha3="KES", name="Kenyan shilling", numeric="404", minor_unit=2),
    Currency(alpha3="KGS", name="Kyrgyzstani som", numeric="417", minor_unit=2),
    Currency(alpha3="KHR", name="Cambodian riel", numeric="116", minor_unit=2),
    Currency(alpha3="KMF", name="Comoro franc", numeric="174", minor_unit=0),
    Currency(alpha3="KPW", name="North Korean won", numeric="408", minor_unit=0),
    Currency(alpha3="KRW", name="South Korean won", numeric="410", minor_unit=0),
    Currency(alpha3="KWD", name="Kuwaiti dinar", numeric="414", minor_unit=3),
    Currency(alpha3="KYD", name="Cayman Islands dollar", numeric="136", minor_unit=2),
    Currency(alpha3="KZT", name="Kazakhstani tenge", numeric="398", minor_unit=2),
    Currency(alpha3="LAK", name="Lao kip", numeric="418", minor_unit=0),
    Currency(alpha3="LBP", name="Lebanese pound", numeric="422", minor_unit=0),
    Currency(alpha3="LKR", name="Sri Lankan rupee", numeric="144", minor_unit=2),
    Currency(alpha3="LRD", name="Liberian dollar", numeric="430", minor_unit=2),
    Currency(alpha3="LSL", name="Lesotho loti", numeric="426", minor_unit=2),
    Currency(alpha3="LTL", name="Lithuanian litas", numeric="440", minor_unit=2),
    Currency(alpha3="LVL", name="Latvian lats", numeric="428", minor_unit=2),
    Currency(alpha3="LYD", name="Libyan dinar", numeric="434", minor_unit=3),
    Currency(alpha3="MAD", name="Moroccan dirham", numeric="504", minor_unit=2),
    Currency(alpha3="MDL", name="Moldovan leu", numeric="498", minor_unit=2),
    Currency(alpha3="MGA", name="Malagasy ariary", numeric="969", minor_unit=0),
    Currency(alpha3="MKD", name="Macedonian denar", numeric="807", minor_unit=0),
    Currency(alpha3="MMK", name="Myanma kyat", numeric="104", minor_unit=0),
    Currency(alpha3="MNT", name="Mongolian tugrik", numeric="496", minor_unit=2),
    Currency(alpha3="MOP", name="Macanese pataca", numeric="446", minor_unit=2),
    Currency(alpha3="MRO", name="Mauritanian ouguiya", numeric="478", minor_unit=0),
    Currency(alpha3="MRU", name="Mauritanian ouguiya (2018)", numeric="929", minor_unit=2),
    Currency(alpha3="MUR", name="Mauritian rupee", numeric="480", minor_unit=2),
    Currency(alpha3="MVR", name="Maldivian rufiyaa", numeric="462", minor_unit=2),
    Currency(alpha3="MWK", name="Malawian kwacha", numeric="454", minor_unit=2),
    Currency(alpha3="MXN", name="Mexican peso", numeric="484", minor_unit=2),
    Currency(alpha3="MXV", name="Mexican Unidad de Inversion (UDI) (funds code)", numeric="979", minor_unit=2),
    Currency(alpha3="MYR", name="Malaysian ringgit", numeric="458", minor_unit=2),
    Currency(alpha3="MZN", name="Mozambican metical", numeric="943", minor_unit=2),
    Currency(alpha3="NAD", name="Namibian dollar", numeric="516", minor_unit=2),
    Currency(alpha3="NGN", name="Nigerian naira", numeric="566", minor_unit=2),
    Currency(alpha3="NIO", name="Nicaraguan córdoba", numeric="558", minor_unit=2),
    Currency(alpha3="NOK", name="Norwegian krone", numeric="578", minor_unit=2),
    Currency(alpha3="NPR", name="Nepalese rupee", numeric="524", minor_unit=2),
    Currency(alpha3="NZD", name="New Zealand dollar", numeric="554", minor_unit=2),
    Currency(alpha3="OMR", name="Omani rial", numeric="512", minor_unit=3),
    Currency(alpha3="PAB", name="Panamanian balboa", numeric="590", minor_unit=2),
    Currency(alpha3="PEN", name="Peruvian nuevo sol", numeric="604", minor_unit=2),
    Currency(alpha3="PGK", name="Papua New Guinean kina", numeric="598", minor_unit=2),
    Currency(alpha3="PHP", name="Philippine peso", numeric="608", minor_unit=2),
    Currency(alpha3="PKR", name="Pakistani rupee", numeric="586", minor_unit=2),
    Currency(alpha3="PLN", name="Polish złoty", numeric="985", minor_unit=2),
    Currency(alpha3="PYG", name="Paraguayan guaraní", numeric="600", minor_unit=0),
    Currency(alpha3="QAR", name="Qatari riyal", numeric="634", minor_unit=2),
    Currency(alpha3="RON", name="Romanian new leu", numeric="946", minor_unit=2),
    Currency(alpha3="RSD", name="Serbian dinar", numeric="941", minor_unit=2),
    Currency(alpha3="RUB", name="Russian rouble", numeric="643", minor_unit=2),
    Currency(alpha3="RWF", name="Rwandan franc", numeric="646", minor_unit=0),
    Currency(alpha3="SAR", name="Saudi riyal", numeric="682", minor_unit=2),
    Currency(alpha3="SBD", name="Solomon Islands dollar", numeric="90", minor_unit=2),
    Currency(alpha3="SCR", name="Seychelles rupee", numeric="690", minor_unit=2),
    Currency(alpha3="SDG", name="Sudanese pound", numeric="938", minor_unit=2),
    Currency(alpha3="SEK", name="Swedish krona/kronor", numeric="752", minor_unit=2),
    Currency(alpha3="SGD", name="Singapore dollar", numeric="702", minor_unit=2),
    Currency(alpha3="SHP", name="Saint Helena pound", numeric="654", minor_unit=2),
    Currency(alpha3="SLL", name="Sierra Leonean leone", numeric="694", minor_unit=0),
    Currency(alpha3="SOS", name="Somali shilling", numeric="706", minor_unit=2),
    Currency(alpha3="SRD", name="Surinamese dollar", numeric="968", minor_unit=2),
    Currency(alpha3="SSP", name="South Sudanese pound", numeric="728", minor_unit=2),
    Currency(alpha3="STD", name="São Tomé and Príncipe dobra", numeric="678", minor_unit=0),
    Currency(alpha3="STN", name="São Tomé and Príncipe dobra (2018)", numeric="930", minor_unit=2),
    Currency(alpha3="SVC", name="Salvadoran colón", numeric="222", minor_unit=2),
    Currency(alpha3="SYP", name="Syrian pound", numeric="760", minor_unit=2),
    Currency(alpha3="SZL", name="Swazi lilangeni", numeric="748", minor_unit=2),
    Currency(alpha3="THB", name="Thai baht", numeric="764", minor_unit=2),
    Currency(alpha3="TJS", name="Tajikistani somoni", numeric="972", minor_unit=2),
    Currency(alpha3="TMT", name="Turkmenistani manat", numeric="934", minor_unit=2),
    Currency(alpha3="TND", name="Tunisian dinar", numeric="788", minor_unit=3),
    Currency(alpha3="TOP", name="Tongan paʻanga", numeric="776", minor_unit=2),
    Currency(alpha3="TRY", name="Turkish lira", numeric="949", minor_unit=2),
    Currency(alpha3="TTD", name="Trinidad and Tobago dollar", numeric="780", minor_unit=2),
    Currency(alpha3="TWD", name="New Taiwan dollar", numeric="901", minor_unit=2),
    Currency(alpha3="TZS", name="Tanzanian shilling", numeric="834", minor_unit=2),
    Currency(alpha3="UAH", name="Ukrainian hryvnia", numeric="980", minor_unit=2),
    Currency(alpha3="UGX", name="Ugandan shilling", numeric="800", minor_unit=2),
    Currency(alpha3="USD", name="United States dollar", numeric="840", minor_unit=2),
    Currency(alpha3="USN", name="United States dollar (next day) (funds code)", numeric="997", minor_unit=2),
    Currency(alpha3="USS", name="United States dollar (same day) (funds code)", numeric="998", minor_unit=2),
    Currency(alpha3="UYI", name="Uruguay Peso en Unidades Indexadas (URUIURUI) (funds code)", numeric="940", minor_unit=0),
    Currency(alpha3="UYU", name="Uruguayan peso", numeric="858", minor_unit=2),
    Currency(alpha3="UZS", name="Uzbekistan som", numeric="860", minor_unit=2),
    Currency(alpha3="VEF", name="Venezuelan bolívar fuerte", numeric="937", minor_unit=2),
    Currency(alpha3="VES", name="Venezuelan bolívar soberano", numeric="928", minor_unit=2),
    Currency(alpha3="VND", name="Vietnamese dong", numeric="704", minor_unit=0),
    Currency(alpha3="VUV", name="Vanuatu vatu", numeric="548", minor_unit=0),
    Currency(alpha3="WST", name="Samoan tala", numeric="882", minor_unit=2),
    Currency(alpha3="XAF", name="CFA franc BEAC", numeric="950", minor_unit=0),
    Currency(alpha3="XAG", name="Silver (one troy ounce)", numeric="961", minor_unit=0),
    Currency(alpha3="XAU", name="Gold (one troy ounce)", numeric="959", minor_unit=0),
    Currency(alpha3="XBA", name="European Composite Unit (EURCO) (bond market unit)", numeric="955", minor_unit=0),
    Currency(alpha3="XBB", name="European Monetary Unit (E.M.U.-6) (bond market unit)", numeric="956", minor_unit=0),
    Currency(alpha3="XBC", name="European Unit of Account 9 (E.U.A.-9) (bond market unit)", numeric="957", minor_unit=0),
    Currency(alpha3="XBD", name="European Unit of Account 17 (E.U.A.-17) (bond market unit)", numeric="958", minor_unit=0),
    Currency(alpha3="XCD", name="East Caribbean dollar", numeric="951", minor_unit=2),
    Currency(alpha3="XDR", name="Special drawing rights", numeric="960", minor_unit=0),
    Currency(alpha3="XFU", name="UIC franc (special settlement currency)", numeric=None, minor_unit=0),
    Currency(alpha3="XOF", name="CFA franc BCEAO", numeric="952", minor_unit=0),
    Currency(alpha3="XPD", name="Palladium (one troy ounce)", numeric="964", minor_unit=0),
    Currency(alpha3="XPF", name="CFP franc", numeric="953", minor_unit=0),
    Currency(alpha3="XPT", name="Platinum (one troy ounce)", numeric="962", minor_unit=0),
    Currency(alpha3="XTS", name="Code reserved for testing purposes", numeric="963", minor_unit=0),
    Currency(alpha3="XXX", name="No currency", numeric="999", minor_unit=0),
    Currency(alpha3="YER", name="Yemeni rial", numeric="886", minor_unit=2),
    Currency(alpha3="ZAR", name="South African rand", numeric="710", minor_unit=2),
    Currency(alpha3="ZMW", name="Zambian kwacha", numeric="967", minor_unit=2),
)
