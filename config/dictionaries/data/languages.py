# -*- coding: utf-8 -*-
# config/dictionaries/data/languages.py
"""ISO 639-1 / 639-2/T language table. Order is the catalog order."""

from config.dictionaries.models import Language


LANGUAGES: tuple[Language, ...] = (
    Language(
        alpha2="aa", alpha3="aar", name="Afar", name2="Afar",
        native_name="Afar", family="Afro-Asiatic",
    ),
    Language(
        alpha2="ab", alpha3="abk", name="Abkhaz", name2="Abkhazian",
        native_name="Аҧсуа", family="Northwest Caucasian",
    ),
    Language(
        alpha2="ae", alpha3="ave", name="Avestan", name2="Avestan",
        native_name="avesta", family="Indo-European",
    ),
    Language(
        alpha2="af", alpha3="afr", name="Afrikaans", name2="Afrikaans",
        native_name="Afrikaans", family="Indo-European",
    ),
    Language(
        alpha2="ak", alpha3="aka", name="Akan", name2="Akan",
        native_name="Akana", family="Niger–Congo",
    ),
    Language(
        alpha2="am", alpha3="amh", name="Amharic", name2="Amharic",
        native_name="አማርኛ", family="Afro-Asiatic",
    ),
    Language(
        alpha2="an", alpha3="arg", name="Aragonese", name2="Aragonese",
        native_name="Aragonés", family="Indo-European",
    ),
    Language(
        alpha2="av", alpha3="ava", name="Avaric", name2="Avar",
        native_name="Авар", family="Northeast Caucasian",
    ),
    Language(
        alpha2="as", alpha3="asm", name="Assamese", name2="Assamese",
        native_name="অসমীয়া", family="Indo-European",
    ),
    Language(
        alpha2="ar", alpha3="ara", name="Arabic", name2="Arabic",
        native_name="العربية", family="Afro-Asiatic",
    ),
    Language(
        alpha2="az", alpha3="aze", name="Azerbaijani", name2="Azerbaijani",
        native_name="Azərbaycanca / آذربايجان", family="Turkic",
    ),
    Language(
        alpha2="ay", alpha3="aym", name="Aymara", name2="Aymara",
        native_name="Aymar", family="Aymaran",
    ),
    Language(
        alpha2="ba", alpha3="bak", name="Bashkir", name2="Bashkir",
        native_name="Башҡорт", family="Turkic",
    ),
    Language(
        alpha2="be", alpha3="bel", name="Belarusian", name2="Belarusian",
        native_name="Беларуская", family="Indo-European",
    ),
    Language(
        alpha2="bg", alpha3="bul", name="Bulgarian", name2="Bulgarian",
        native_name="Български", family="Indo-European",
    ),
    Language(
        alpha2="bh", alpha3="bih", name="Bihari", name2="Bihari",
        native_name="भोजपुरी", family="Indo-European",
    ),
    Language(
        alpha2="bi", alpha3="bis", name="Bislama", name2="Bislama",
        native_name="Bislama", family="Creole",
    ),
    Language(
        alpha2="bm", alpha3="bam", name="Bambara", name2="Bambara",
        native_name="Bamanankan", family="Niger–Congo",
    ),
    Language(
        alpha2="bn", alpha3="ben", name="Bengali, Bangla", name2="Bengali",
        native_name="বাংলা", family="Indo-European",
    ),
    Language(
        alpha2="bo", alpha3="bod", name="Tibetan Standard, Tibetan, Central", name2="Tibetan",
        native_name="བོད་ཡིག / Bod skad", family="Sino-Tibetan",
    ),
    Language(
        alpha2="br", alpha3="bre", name="Breton", name2="Breton",
        native_name="Brezhoneg", family="Indo-European",
    ),
    Language(
        alpha2="bs", alpha3="bos", name="Bosnian", name2="Bosnian",
        native_name="Bosanski", family="Indo-European",
    ),
    Language(
        alpha2="ca", alpha3="cat", name="Catalan", name2="Catalan",
        native_name="Català", family="Indo-European",
    ),
    Language(
        alpha2="ce", alpha3="che", name="Chechen", name2="Chechen",
        native_name="Нохчийн", family="Northeast Caucasian",
    ),
    Language(
        alpha2="ch", alpha3="cha", name="Chamorro", name2="Chamorro",
        native_name="Chamoru", family="Austronesian",
    ),
    Language(
        alpha2="co", alpha3="cos", name="Corsican", name2="Corsican",
        native_name="Corsu", family="Indo-European",
    ),
    Language(
        alpha2="cr", alpha3="cre", name="Cree", name2="Cree",
        native_name="Nehiyaw", family="Algonquian",
    ),
    Language(
        alpha2="cs", alpha3="ces", name="Czech", name2="Czech",
        native_name="Čeština", family="Indo-European",
    ),
    Language(
        alpha2="cu", alpha3="chu", name="Old Church Slavonic, Church Slavonic, Old Bulgarian", name2="Old Church Slavonic / Old Bulgarian",
        native_name="словѣньскъ / slověnĭskŭ", family="Indo-European",
    ),
    Language(
        alpha2="cv", alpha3="chv", name="Chuvash", name2="Chuvash",
        native_name="Чăваш", family="Turkic",
    ),
    Language(
        alpha2="cy", alpha3="cym", name="Welsh", name2="Welsh",
        native_name="Cymraeg", family="Indo-European",
    ),
    Language(
        alpha2="da", alpha3="dan", name="Danish", name2="Danish",
        native_name="Dansk", family="Indo-European",
    ),
    Language(
        alpha2="de", alpha3="deu", name="German", name2="German",
        native_name="Deutsch", family="Indo-European",
    ),
    Language(
        alpha2="dv", alpha3="div", name="Divehi, Dhivehi, Maldivian", name2="Divehi",
        native_name="ދިވެހިބަސް", family="Indo-European",
    ),
    Language(
        alpha2="dz", alpha3="dzo", name="Dzongkha", name2="Dzongkha",
        native_name="ཇོང་ཁ", family="Sino-Tibetan",
    ),
    Language(
        alpha2="ee", alpha3="ewe", name="Ewe", name2="Ewe",
        native_name="Ɛʋɛ", family="Niger–Congo",
    ),
    Language(
        alpha2="el", alpha3="ell", name="Greek (modern)", name2="Greek",
        native_name="Ελληνικά", family="Indo-European",
    ),
    Language(
        alpha2="en", alpha3="eng", name="English", name2="English",
        native_name="English", family="Indo-European",
    ),
    Language(
        alpha2="eo", alpha3="epo", name="Esperanto", name2="Esperanto",
        native_name="Esperanto", family="Constructed",
    ),
    Language(
        alpha2="es", alpha3="spa", name="Spanish", name2="Spanish",
        native_name="Español", family="Indo-European",
    ),
    Language(
        alpha2="et", alpha3="est", name="Estonian", name2="Estonian",
        native_name="Eesti", family="Uralic",
    ),
    Language(
        alpha2="eu", alpha3="eus", name="Basque", name2="Basque",
        native_name="Euskara", family="Language isolate",
    ),
    Language(
        alpha2="fa", alpha3="fas", name="Persian (Farsi)", name2="Persian",
        native_name="فارسی", family="Indo-European",
    ),
    Language(
        alpha2="ff", alpha3="ful", name="Fula, Fulah, Pulaar, Pular", name2="Peul",
        native_name="Fulfulde", family="Niger–Congo",
    ),
    Language(
        alpha2="fi", alpha3="fin", name="Finnish", name2="Finnish",
        native_name="Suomi", family="Uralic",
    ),
    Language(
        alpha2="fj", alpha3="fij", name="Fijian", name2="Fijian",
        native_name="Na Vosa Vakaviti", family="Austronesian",
    ),
    Language(
        alpha2="fo", alpha3="fao", name="Faroese", name2="Faroese",
        native_name="Føroyskt", family="Indo-European",
    ),
    Language(
        alpha2="fr", alpha3="fra", name="French", name2="French",
        native_name="Français", family="Indo-European",
    ),
    Language(
        alpha2="fy", alpha3="fry", name="Western Frisian", name2="West Frisian",
        native_name="Frysk", family="Indo-European",
    ),
    Language(
        alpha2="ga", alpha3="gle", name="Irish", name2="Irish",
        native_name="Gaeilge", family="Indo-European",
    ),
    Language(
        alpha2="gd", alpha3="gla", name="Scottish Gaelic, Gaelic", name2="Scottish Gaelic",
        native_name="Gàidhlig", family="Indo-European",
    ),
    Language(
        alpha2="gl", alpha3="glg", name="Galician", name2="Galician",
        native_name="Galego", family="Indo-European",
    ),
    Language(
        alpha2="gn", alpha3="grn", name="Guaraní", name2="Guarani",
        native_name="Avañe'ẽ", family="Tupian",
    ),
    Language(
        alpha2="gu", alpha3="guj", name="Gujarati", name2="Gujarati",
        native_name="ગુજરાતી", family="Indo-European",
    ),
    Language(
        alpha2="gv", alpha3="glv", name="Manx", name2="Manx",
        native_name="Gaelg", family="Indo-European",
    ),
    Language(
        alpha2="ha", alpha3="hau", name="Hausa", name2="Hausa",
        native_name="هَوُسَ", family="Afro-Asiatic",
    ),
    Language(
        alpha2="he", alpha3="heb", name="Hebrew (modern)", name2="Hebrew",
        native_name="עברית", family="Afro-Asiatic",
    ),
    Language(
        alpha2="hi", alpha3="hin", name="Hindi", name2="Hindi",
        native_name="हिन्दी", family="Indo-European",
    ),
    Language(
        alpha2="ho", alpha3="hmo", name="Hiri Motu", name2="Hiri Motu",
        native_name="Hiri Motu", family="Austronesian",
    ),
    Language(
        alpha2="hr", alpha3="hrv", name="Croatian", name2="Croatian",
        native_name="Hrvatski", family="Indo-European",
    ),
    Language(
        alpha2="ht", alpha3="hat", name="Haitian, Haitian Creole", name2="Haitian",
        native_name="Krèyol ayisyen", family="Creole",
    ),
    Language(
        alpha2="hu", alpha3="hun", name="Hungarian", name2="Hungarian",
        native_name="Magyar", family="Uralic",
    ),
    Language(
        alpha2="hy", alpha3="hye", name="Armenian", name2="Armenian",
        native_name="Հայերեն", family="Indo-European",
    ),
    Language(
        alpha2="hz", alpha3="her", name="Herero", name2="Herero",
        native_name="Otsiherero", family="Niger–Congo",
    ),
    Language(
        alpha2="ia", alpha3="ina", name="Interlingua", name2="Interlingua",
        native_name="Interlingua", family="Constructed",
    ),
    Language(
        alpha2="id", alpha3="ind", name="Indonesian", name2="Indonesian",
        native_name="Bahasa Indonesia", family="Austronesian",
    ),
    Language(
        alpha2="ie", alpha3="ile", name="Interlingue", name2="Interlingue",
        native_name="Interlingue", family="Constructed",
    ),
    Language(
        alpha2="ig", alpha3="ibo", name="Igbo", name2="Igbo",
        native_name="Igbo", family="Niger–Congo",
    ),
    Language(
        alpha2="ii", alpha3="iii", name="Nuosu", name2="Sichuan Yi",
        native_name="ꆇꉙ / 四川彝语", family="Sino-Tibetan",
    ),
    Language(
        alpha2="ik", alpha3="ipk", name="Inupiaq", name2="Inupiak",
        native_name="Iñupiak", family="Eskimo–Aleut",
    ),
    Language(
        alpha2="io", alpha3="ido", name="Ido", name2="Ido",
        native_name="Ido", family="Constructed",
    ),
    Language(
        alpha2="is", alpha3="isl", name="Icelandic", name2="Icelandic",
        native_name="Íslenska", family="Indo-European",
    ),
    Language(
        alpha2="it", alpha3="ita", name="Italian", name2="Italian",
        native_name="Italiano", family="Indo-European",
    ),
    Language(
        alpha2="iu", alpha3="iku", name="Inuktitut", name2="Inuktitut",
        native_name="ᐃᓄᒃᑎᑐᑦ", family="Eskimo–Aleut",
    ),
    Language(
        alpha2="ja", alpha3="jpn", name="Japanese", name2="Japanese",
        native_name="日本語", family="Japonic",
    ),
    Language(
        alpha2="jv", alpha3="jav", name="Javanese", name2="Javanese",
        native_name="Basa Jawa", family="Austronesian",
    ),
    Language(
        alpha2="ka", alpha3="kat", name="Georgian", name2="Georgian",
        native_name="ქართული", family="South Caucasian",
    ),
    Language(
        alpha2="kg", alpha3="kon", name="Kongo", name2="Kongo",
        native_name="KiKongo", family="Niger–Congo",
    ),
    Language(
        alpha2="ki", alpha3="kik", name="Kikuyu, Gikuyu", name2="Kikuyu",
        native_name="Gĩkũyũ", family="Niger–Congo",
    ),
    Language(
        alpha2="kj", alpha3="kua", name="Kwanyama, Kuanyama", name2="Kuanyama",
        native_name="Kuanyama", family="Niger–Congo",
    ),
    Language(
        alpha2="kk", alpha3="kaz", name="Kazakh", name2="Kazakh",
        native_name="Қазақша", family="Turkic",
    ),
    Language(
        alpha2="kl", alpha3="kal", name="Kalaallisut, Greenlandic", name2="Greenlandic",
        native_name="Kalaallisut", family="Eskimo–Aleut",
    ),
    Language(
        alpha2="km", alpha3="khm", name="Khmer", name2="Cambodian",
        native_name="ភាសាខ្មែរ", family="Austroasiatic",
    ),
    Language(
        alpha2="kn", alpha3="kan", name="Kannada", name2="Kannada",
        native_name="ಕನ್ನಡ", family="Dravidian",
    ),
    Language(
        alpha2="ko", alpha3="kor", name="Korean", name2="Korean",
        native_name="한국어", family="Koreanic",
    ),
    Language(
        alpha2="kr", alpha3="kau", name="Kanuri", name2="Kanuri",
        native_name="Kanuri", family="Nilo-Saharan",
    ),
    Language(
        alpha2="ks", alpha3="kas", name="Kashmiri", name2="Kashmiri",
        native_name="कश्मीरी / كشميري", family="Indo-European",
    ),
    Language(
        alpha2="ku", alpha3="kur", name="Kurdish", name2="Kurdish",
        native_name="Kurdî / كوردی", family="Indo-European",
    ),
    Language(
        alpha2="kv", alpha3="kom", name="Komi", name2="Komi",
        native_name="Коми", family="Uralic",
    ),
    Language(
        alpha2="kw", alpha3="cor", name="Cornish", name2="Cornish",
        native_name="Kernewek", family="Indo-European",
    ),
    Language(
        alpha2="ky", alpha3="kir", name="Kyrgyz", name2="Kyrgyz",
        native_name="Кыргызча", family="Turkic",
    ),
    Language(
        alpha2="la", alpha3="lat", name="Latin", name2="Latin",
        native_name="Latina", family="Indo-European",
    ),
    Language(
        alpha2="lb", alpha3="ltz", name="Luxembourgish, Letzeburgesch", name2="Luxembourgish",
        native_name="Lëtzebuergesch", family="Indo-European",
    ),
    Language(
        alpha2="lg", alpha3="lug", name="Ganda", name2="Ganda",
        native_name="Luganda", family="Niger–Congo",
    ),
    Language(
        alpha2="li", alpha3="lim", name="Limburgish, Limburgan, Limburger", name2="Limburgian",
        native_name="Limburgs", family="Indo-European",
    ),
    Language(
        alpha2="ln", alpha3="lin", name="Lingala", name2="Lingala",
        native_name="Lingála", family="Niger–Congo",
    ),
    Language(
        alpha2="lo", alpha3="lao", name="Lao", name2="Laotian",
        native_name="ລາວ / Pha xa lao", family="Tai–Kadai",
    ),
    Language(
        alpha2="lt", alpha3="lit", name="Lithuanian", name2="Lithuanian",
        native_name="Lietuvių", family="Indo-European",
    ),
    Language(
        alpha2="lu", alpha3="lub", name="Luba-Katanga", name2="Luba-Katanga",
        native_name="Tshiluba", family="Niger–Congo",
    ),
    Language(
        alpha2="lv", alpha3="lav", name="Latvian", name2="Latvian",
        native_name="Latviešu", family="Indo-European",
    ),
    Language(
        alpha2="mg", alpha3="mlg", name="Malagasy", name2="Malagasy",
        native_name="Malagasy", family="Austronesian",
    ),
    Language(
        alpha2="mh", alpha3="mah", name="Marshallese", name2="Marshallese",
        native_name="Kajin Majel / Ebon", family="Austronesian",
    ),
    Language(
        alpha2="mi", alpha3="mri", name="Māori", name2="Maori",
        native_name="Māori", family="Austronesian",
    ),
    Language(
        alpha2="mk", alpha3="mkd", name="Macedonian", name2="Macedonian",
        native_name="Македонски", family="Indo-European",
    ),
    Language(
        alpha2="ml", alpha3="mal", name="Malayalam", name2="Malayalam",
        native_name="മലയാളം", family="Dravidian",
    ),
    Language(
        alpha2="mn", alpha3="mon", name="Mongolian", name2="Mongolian",
        native_name="Монгол", family="Mongolic",
    ),
    Language(
        alpha2="mr", alpha3="mar", name="Marathi (Marāṭhī)", name2="Marathi",
        native_name="मराठी", family="Indo-European",
    ),
    Language(
        alpha2="ms", alpha3="msa", name="Malay", name2="Malay",
        native_name="Bahasa Melayu", family="Austronesian",
    ),
    Language(
        alpha2="mt", alpha3="mlt", name="Maltese", name2="Maltese",
        native_name="bil-Malti", family="Afro-Asiatic",
    ),
    Language(
        alpha2="my", alpha3="mya", name="Burmese", name2="Burmese",
        native_name="မြန်မာစာ", family="Sino-Tibetan",
    ),
    Language(
        alpha2="na", alpha3="nau", name="Nauruan", name2="Nauruan",
        native_name="Dorerin Naoero", family="Austronesian",
    ),
    Language(
        alpha2="nb", alpha3="nob", name="Norwegian Bokmål", name2="Norwegian Bokmål",
        native_name="Norsk bokmål", family="Indo-European",
    ),
    Language(
        alpha2="nd", alpha3="nde", name="Northern Ndebele", name2="North Ndebele",
        native_name="Sindebele", family="Niger–Congo",
    ),
    Language(
        alpha2="ne", alpha3="nep", name="Nepali", name2="Nepali",
        native_name="नेपाली", family="Indo-European",
    ),
    Language(
        alpha2="ng", alpha3="ndo", name="Ndonga", name2="Ndonga",
        native_name="Oshiwambo", family="Niger–Congo",
    ),
    Language(
        alpha2="nl", alpha3="nld", name="Dutch", name2="Dutch",
        native_name="Nederlands", family="Indo-European",
    ),
    Language(
        alpha2="nn", alpha3="nno", name="Norwegian Nynorsk", name2="Norwegian Nynorsk",
        native_name="Norsk nynorsk", family="Indo-European",
    ),
    Language(
        alpha2="no", alpha3="nor", name="Norwegian", name2="Norwegian",
        native_name="Norsk", family="Indo-European",
    ),
    Language(
        alpha2="nr", alpha3="nbl", name="Southern Ndebele", name2="South Ndebele",
        native_name="isiNdebele", family="Niger–Congo",
    ),
    Language(
        alpha2="nv", alpha3="nav", name="Navajo, Navaho", name2="Navajo",
        native_name="Diné bizaad", family="Dené–Yeniseian",
    ),
    Language(
        alpha2="ny", alpha3="nya", name="Chichewa, Chewa, Nyanja", name2="Chichewa",
        native_name="Chi-Chewa", family="Niger–Congo",
    ),
    Language(
        alpha2="oc", alpha3="oci", name="Occitan", name2="Occitan",
        native_name="Occitan", family="Indo-European",
    ),
    Language(
        alpha2="oj", alpha3="oji", name="Ojibwe, Ojibwa", name2="Ojibwa",
        native_name="ᐊᓂᔑᓈᐯᒧᐎᓐ / Anishinaabemowin", family="Algonquian",
    ),
    Language(
        alpha2="om", alpha3="orm", name="Oromo", name2="Oromo",
        native_name="Oromoo", family="Afro-Asiatic",
    ),
    Language(
        alpha2="or", alpha3="ori", name="Oriya", name2="Oriya",
        native_name="ଓଡ଼ିଆ", family="Indo-European",
    ),
    Language(
        alpha2="os", alpha3="oss", name="Ossetian, Ossetic", name2="Ossetian / Ossetic",
        native_name="Иронау", family="Indo-European",
    ),
    Language(
        alpha2="pa", alpha3="pan", name="(Eastern) Punjabi", name2="Panjabi / Punjabi",
        native_name="ਪੰਜਾਬੀ / पंजाबी / پنجابي", family="Indo-European",
    ),
    Language(
        alpha2="pi", alpha3="pli", name="Pāli", name2="Pali",
        native_name="Pāli / पाऴि", family="Indo-European",
    ),
    Language(
        alpha2="pl", alpha3="pol", name="Polish", name2="Polish",
        native_name="Polski", family="Indo-European",
    ),
    Language(
        alpha2="ps", alpha3="pus", name="Pashto, Pushto", name2="Pashto",
        native_name="پښتو", family="Indo-European",
    ),
    Language(
        alpha2="pt", alpha3="por", name="Portuguese", name2="Portuguese",
        native_name="Português", family="Indo-European",
    ),
    Language(
        alpha2="qu", alpha3="que", name="Quechua", name2="Quechua",
        native_name="Runa Simi", family="Quechuan",
    ),
    Language(
        alpha2="rm", alpha3="roh", name="Romansh", name2="Raeto Romance",
        native_name="Rumantsch", family="Indo-European",
    ),
    Language(
        alpha2="rn", alpha3="run", name="Kirundi", name2="Kirundi",
        native_name="Kirundi", family="Niger–Congo",
    ),
    Language(
        alpha2="ro", alpha3="ron", name="Romanian", name2="Romanian",
        native_name="Română", family="Indo-European",
    ),
    Language(
        alpha2="ru", alpha3="rus", name="Russian", name2="Russian",
        native_name="Русский", family="Indo-European",
    ),
    Language(
        alpha2="rw", alpha3="kin", name="Kinyarwanda", name2="Rwandi",
        native_name="Kinyarwandi", family="Niger–Congo",
    ),
    Language(
        alpha2="sa", alpha3="san", name="Sanskrit (Saṁskṛta)", name2="Sanskrit",
        native_name="संस्कृतम्", family="Indo-European",
    ),
    Language(
        alpha2="sc", alpha3="srd", name="Sardinian", name2="Sardinian",
        native_name="Sardu", family="Indo-European",
    ),
    Language(
        alpha2="sd", alpha3="snd", name="Sindhi", name2="Sindhi",
        native_name="सिनधि", family="Indo-European",
    ),
    Language(
        alpha2="se", alpha3="sme", name="Northern Sami", name2="Northern Sami",
        native_name="Sámegiella", family="Uralic",
    ),
    Language(
        alpha2="sg", alpha3="sag", name="Sango", name2="Sango",
        native_name="Sängö", family="Creole",
    ),
    Language(
        alpha2="si", alpha3="sin", name="Sinhalese, Sinhala", name2="Sinhalese",
        native_name="සිංහල", family="Indo-European",
    ),
    Language(
        alpha2="sk", alpha3="slk", name="Slovak", name2="Slovak",
        native_name="Slovenčina", family="Indo-European",
    ),
    Language(
        alpha2="sl", alpha3="slv", name="Slovene", name2="Slovenian",
        native_name="Slovenščina", family="Indo-European",
    ),
    Language(
        alpha2="sm", alpha3="smo", name="Samoan", name2="Samoan",
        native_name="Gagana Samoa", family="Austronesian",
    ),
    Language(
        alpha2="sn", alpha3="sna", name="Shona", name2="Shona",
        native_name="chiShona", family="Niger–Congo",
    ),
    Language(
        alpha2="so", alpha3="som", name="Somali", name2="Somalia",
        native_name="Soomaaliga", family="Afro-Asiatic",
    ),
    Language(
        alpha2="sq", alpha3="sqi", name="Albanian", name2="Albanian",
        native_name="Shqip", family="Indo-European",
    ),
    Language(
        alpha2="sr", alpha3="srp", name="Serbian", name2="Serbian",
        native_name="Српски", family="Indo-European",
    ),
    Language(
        alpha2="ss", alpha3="ssw", name="Swati", name2="Swati",
        native_name="SiSwati", family="Niger–Congo",
    ),
    Language(
        alpha2="st", alpha3="sot", name="Southern Sotho", name2="Southern Sotho",
        native_name="Sesotho", family="Niger–Congo",
    ),
    Language(
        alpha2="su", alpha3="sun", name="Sundanese", name2="Sundanese",
        native_name="Basa Sunda", family="Austronesian",
    ),
    Language(
        alpha2="sv", alpha3="swe", name="Swedish", name2="Swedish",
        native_name="Svenska", family="Indo-European",
    ),
    Language(
        alpha2="sw", alpha3="swa", name="Swahili", name2="Swahili",
        native_name="Kiswahili", family="Niger–Congo",
    ),
    Language(
        alpha2="ta", alpha3="tam", name="Tamil", name2="Tamil",
        native_name="தமிழ்", family="Dravidian",
    ),
    Language(
        alpha2="te", alpha3="tel", name="Telugu", name2="Telugu",
        native_name="తెలుగు", family="Dravidian",
    ),
    Language(
        alpha2="tg", alpha3="tgk", name="Tajik", name2="Tajik",
        native_name="Тоҷикӣ", family="Indo-European",
    ),
    Language(
        alpha2="th", alpha3="tha", name="Thai", name2="Thai",
        native_name="ไทย / Phasa Thai", family="Tai–Kadai",
    ),
    Language(
        alpha2="ti", alpha3="tir", name="Tigrinya", name2="Tigrinya",
        native_name="ትግርኛ", family="Afro-Asiatic",
    ),
    Language(
        alpha2="tk", alpha3="tuk", name="Turkmen", name2="Turkmen",
        native_name="Туркмен / تركمن", family="Turkic",
    ),
    Language(
        alpha2="tl", alpha3="tgl", name="Tagalog", name2="Tagalog / Filipino",
        native_name="Tagalog", family="Austronesian",
    ),
    Language(
        alpha2="tn", alpha3="tsn", name="Tswana", name2="Tswana",
        native_name="Setswana", family="Niger–Congo",
    ),
    Language(
        alpha2="to", alpha3="ton", name="Tonga (Tonga Islands)", name2="Tonga",
        native_name="Lea Faka-Tonga", family="Austronesian",
    ),
    Language(
        alpha2="tr", alpha3="tur", name="Turkish", name2="Turkish",
        native_name="Türkçe", family="Turkic",
    ),
    Language(
        alpha2="ts", alpha3="tso", name="Tsonga", name2="Tsonga",
        native_name="Xitsonga", family="Niger–Congo",
    ),
    Language(
        alpha2="tt", alpha3="tat", name="Tatar", name2="Tatar",
        native_name="Tatarça", family="Turkic",
    ),
    Language(
        alpha2="tw", alpha3="twi", name="Twi", name2="Twi",
        native_name="Twi", family="Niger–Congo",
    ),
    Language(
        alpha2="ty", alpha3="tah", name="Tahitian", name2="Tahitian",
        native_name="Reo Mā`ohi", family="Austronesian",
    ),
    Language(
        alpha2="ug", alpha3="uig", name="Uyghur", name2="Uyghur",
        native_name="Uyƣurqə / ئۇيغۇرچە", family="Turkic",
    ),
    Language(
        alpha2="uk", alpha3="ukr", name="Ukrainian", name2="Ukrainian",
        native_name="Українська", family="Indo-European",
    ),
    Language(
        alpha2="ur", alpha3="urd", name="Urdu", name2="Urdu",
        native_name="اردو", family="Indo-European",
    ),
    Language(
        alpha2="uz", alpha3="uzb", name="Uzbek", name2="Uzbek",
        native_name="Ўзбек", family="Turkic",
    ),
    Language(
        alpha2="ve", alpha3="ven", name="Venda", name2="Venda",
        native_name="Tshivenḓa", family="Niger–Congo",
    ),
    Language(
        alpha2="vi", alpha3="vie", name="Vietnamese", name2="Vietnamese",
        native_name="Tiếng Việt", family="Austroasiatic",
    ),
    Language(
        alpha2="vo", alpha3="vol", name="Volapük", name2="Volapük",
        native_name="Volapük", family="Constructed",
    ),
    Language(
        alpha2="wa", alpha3="wln", name="Walloon", name2="Walloon",
        native_name="Walon", family="Indo-European",
    ),
    Language(
        alpha2="wo", alpha3="wol", name="Wolof", name2="Wolof",
        native_name="Wollof", family="Niger–Congo",
    ),
    Language(
        alpha2="xh", alpha3="xho", name="Xhosa", name2="Xhosa",
        native_name="isiXhosa", family="Niger–Congo",
    ),
    Language(
        alpha2="yi", alpha3="yid", name="Yiddish", name2="Yiddish",
        native_name="ייִדיש", family="Indo-European",
    ),
    Language(
        alpha2="yo", alpha3="yor", name="Yoruba", name2="Yoruba",
        native_name="Yorùbá", family="Niger–Congo",
    ),
    Language(
        alpha2="za", alpha3="zha", name="Zhuang, Chuang", name2="Zhuang",
        native_name="Cuengh / Tôô / 壮语", family="Tai–Kadai",
    ),
    Language(
        alpha2="zh", alpha3="zho", name="Chinese", name2="Chinese",
        native_name="中文", family="Sino-Tibetan",
    ),
    Language(
        alpha2="zu", alpha3="zul", name="Zulu", name2="Zulu",
        native_name="isiZulu", family="Niger–Congo",
    ),
)
