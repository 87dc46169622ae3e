# Code generated by scripts/generate_keysyms.py from keysymdef.h. DO NOT EDIT.
"""Keysym name to character table for every keysymdef.h entry with a U+ annotation."""

KEYSYMDEF: dict[str, str] = {
    "space": "\u0020",
    "exclam": "\u0021",
    "quotedbl": "\u0022",
    "numbersign": "\u0023",
    "dollar": "\u0024",
    "percent": "\u0025",
    "ampersand": "\u0026",
    "apostrophe": "\u0027",
    "parenleft": "\u0028",
    "parenright": "\u0029",
    "asterisk": "\u002a",
    "plus": "\u002b",
    "comma": "\u002c",
    "minus": "\u002d",
    "period": "\u002e",
    "slash": "\u002f",
    "0": "\u0030",
    "1": "\u0031",
    "2": "\u0032",
    "3": "\u0033",
    "4": "\u0034",
    "5": "\u0035",
    "6": "\u0036",
    "7": "\u0037",
    "8": "\u0038",
    "9": "\u0039",
    "colon": "\u003a",
    "semicolon": "\u003b",
    "less": "\u003c",
    "equal": "\u003d",
    "greater": "\u003e",
    "question": "\u003f",
    "at": "\u0040",
    "A": "\u0041",
    "B": "\u0042",
    "C": "\u0043",
    "D": "\u0044",
    "E": "\u0045",
    "F": "\u0046",
    "G": "\u0047",
    "H": "\u0048",
    "I": "\u0049",
    "J": "\u004a",
    "K": "\u004b",
    "L": "\u004c",
    "M": "\u004d",
    "N": "\u004e",
    "O": "\u004f",
    "P": "\u0050",
    "Q": "\u0051",
    "R": "\u0052",
    "S": "\u0053",
    "T": "\u0054",
    "U": "\u0055",
    "V": "\u0056",
    "W": "\u0057",
    "X": "\u0058",
    "Y": "\u0059",
    "Z": "\u005a",
    "bracketleft": "\u005b",
    "backslash": "\u005c",
    "bracketright": "\u005d",
    "asciicircum": "\u005e",
    "underscore": "\u005f",
    "grave": "\u0060",
    "a": "\u0061",
    "b": "\u0062",
    "c": "\u0063",
    "d": "\u0064",
    "e": "\u0065",
    "f": "\u0066",
    "g": "\u0067",
    "h": "\u0068",
    "i": "\u0069",
    "j": "\u006a",
    "k": "\u006b",
    "l": "\u006c",
    "m": "\u006d",
    "n": "\u006e",
    "o": "\u006f",
    "p": "\u0070",
    "q": "\u0071",
    "r": "\u0072",
    "s": "\u0073",
    "t": "\u0074",
    "u": "\u0075",
    "v": "\u0076",
    "w": "\u0077",
    "x": "\u0078",
    "y": "\u0079",
    "z": "\u007a",
    "braceleft": "\u007b",
    "bar": "\u007c",
    "braceright": "\u007d",
    "asciitilde": "\u007e",
    "nobreakspace": "\u00a0",
    "exclamdown": "\u00a1",
    "cent": "\u00a2",
    "sterling": "\u00a3",
    "currency": "\u00a4",
    "yen": "\u00a5",
    "brokenbar": "\u00a6",
    "section": "\u00a7",
    "diaeresis": "\u00a8",
    "copyright": "\u00a9",
    "ordfeminine": "\u00aa",
    "guillemotleft": "\u00ab",
    "notsign": "\u00ac",
    "hyphen": "\u00ad",
    "registered": "\u00ae",
    "macron": "\u00af",
    "degree": "\u00b0",
    "plusminus": "\u00b1",
    "twosuperior": "\u00b2",
    "threesuperior": "\u00b3",
    "acute": "\u00b4",
    "mu": "\u00b5",
    "paragraph": "\u00b6",
    "periodcentered": "\u00b7",
    "cedilla": "\u00b8",
    "onesuperior": "\u00b9",
    "masculine": "\u00ba",
    "guillemotright": "\u00bb",
    "onequarter": "\u00bc",
    "onehalf": "\u00bd",
    "threequarters": "\u00be",
    "questiondown": "\u00bf",
    "Agrave": "\u00c0",
    "Aacute": "\u00c1",
    "Acircumflex": "\u00c2",
    "Atilde": "\u00c3",
    "Adiaeresis": "\u00c4",
    "Aring": "\u00c5",
    "AE": "\u00c6",
    "Ccedilla": "\u00c7",
    "Egrave": "\u00c8",
    "Eacute": "\u00c9",
    "Ecircumflex": "\u00ca",
    "Ediaeresis": "\u00cb",
    "Igrave": "\u00cc",
    "Iacute": "\u00cd",
    "Icircumflex": "\u00ce",
    "Idiaeresis": "\u00cf",
    "ETH": "\u00d0",
    "Ntilde": "\u00d1",
    "Ograve": "\u00d2",
    "Oacute": "\u00d3",
    "Ocircumflex": "\u00d4",
    "Otilde": "\u00d5",
    "Odiaeresis": "\u00d6",
    "multiply": "\u00d7",
    "Oslash": "\u00d8",
    "Ooblique": "\u00d8",
    "Ugrave": "\u00d9",
    "Uacute": "\u00da",
    "Ucircumflex": "\u00db",
    "Udiaeresis": "\u00dc",
    "Yacute": "\u00dd",
    "THORN": "\u00de",
    "ssharp": "\u00df",
    "agrave": "\u00e0",
    "aacute": "\u00e1",
    "acircumflex": "\u00e2",
    "atilde": "\u00e3",
    "adiaeresis": "\u00e4",
    "aring": "\u00e5",
    "ae": "\u00e6",
    "ccedilla": "\u00e7",
    "egrave": "\u00e8",
    "eacute": "\u00e9",
    "ecircumflex": "\u00ea",
    "ediaeresis": "\u00eb",
    "igrave": "\u00ec",
    "iacute": "\u00ed",
    "icircumflex": "\u00ee",
    "idiaeresis": "\u00ef",
    "eth": "\u00f0",
    "ntilde": "\u00f1",
    "ograve": "\u00f2",
    "oacute": "\u00f3",
    "ocircumflex": "\u00f4",
    "otilde": "\u00f5",
    "odiaeresis": "\u00f6",
    "division": "\u00f7",
    "oslash": "\u00f8",
    "ooblique": "\u00f8",
    "ugrave": "\u00f9",
    "uacute": "\u00fa",
    "ucircumflex": "\u00fb",
    "udiaeresis": "\u00fc",
    "yacute": "\u00fd",
    "thorn": "\u00fe",
    "ydiaeresis": "\u00ff",
    "Aogonek": "\u0104",
    "breve": "\u02d8",
    "Lstroke": "\u0141",
    "Lcaron": "\u013d",
    "Sacute": "\u015a",
    "Scaron": "\u0160",
    "Scedilla": "\u015e",
    "Tcaron": "\u0164",
    "Zacute": "\u0179",
    "Zcaron": "\u017d",
    "Zabovedot": "\u017b",
    "aogonek": "\u0105",
    "ogonek": "\u02db",
    "lstroke": "\u0142",
    "lcaron": "\u013e",
    "sacute": "\u015b",
    "caron": "\u02c7",
    "scaron": "\u0161",
    "scedilla": "\u015f",
    "tcaron": "\u0165",
    "zacute": "\u017a",
    "doubleacute": "\u02dd",
    "zcaron": "\u017e",
    "zabovedot": "\u017c",
    "Racute": "\u0154",
    "Abreve": "\u0102",
    "Lacute": "\u0139",
    "Cacute": "\u0106",
    "Ccaron": "\u010c",
    "Eogonek": "\u0118",
    "Ecaron": "\u011a",
    "Dcaron": "\u010e",
    "Dstroke": "\u0110",
    "Nacute": "\u0143",
    "Ncaron": "\u0147",
    "Odoubleacute": "\u0150",
    "Rcaron": "\u0158",
    "Uring": "\u016e",
    "Udoubleacute": "\u0170",
    "Tcedilla": "\u0162",
    "racute": "\u0155",
    "abreve": "\u0103",
    "lacute": "\u013a",
    "cacute": "\u0107",
    "ccaron": "\u010d",
    "eogonek": "\u0119",
    "ecaron": "\u011b",
    "dcaron": "\u010f",
    "dstroke": "\u0111",
    "nacute": "\u0144",
    "ncaron": "\u0148",
    "odoubleacute": "\u0151",
    "rcaron": "\u0159",
    "uring": "\u016f",
    "udoubleacute": "\u0171",
    "tcedilla": "\u0163",
    "abovedot": "\u02d9",
    "Hstroke": "\u0126",
    "Hcircumflex": "\u0124",
    "Iabovedot": "\u0130",
    "Gbreve": "\u011e",
    "Jcircumflex": "\u0134",
    "hstroke": "\u0127",
    "hcircumflex": "\u0125",
    "idotless": "\u0131",
    "gbreve": "\u011f",
    "jcircumflex": "\u0135",
    "Cabovedot": "\u010a",
    "Ccircumflex": "\u0108",
    "Gabovedot": "\u0120",
    "Gcircumflex": "\u011c",
    "Ubreve": "\u016c",
    "Scircumflex": "\u015c",
    "cabovedot": "\u010b",
    "ccircumflex": "\u0109",
    "gabovedot": "\u0121",
    "gcircumflex": "\u011d",
    "ubreve": "\u016d",
    "scircumflex": "\u015d",
    "kra": "\u0138",
    "Rcedilla": "\u0156",
    "Itilde": "\u0128",
    "Lcedilla": "\u013b",
    "Emacron": "\u0112",
    "Gcedilla": "\u0122",
    "Tslash": "\u0166",
    "rcedilla": "\u0157",
    "itilde": "\u0129",
    "lcedilla": "\u013c",
    "emacron": "\u0113",
    "gcedilla": "\u0123",
    "tslash": "\u0167",
    "ENG": "\u014a",
    "eng": "\u014b",
    "Amacron": "\u0100",
    "Iogonek": "\u012e",
    "Eabovedot": "\u0116",
    "Imacron": "\u012a",
    "Ncedilla": "\u0145",
    "Omacron": "\u014c",
    "Kcedilla": "\u0136",
    "Uogonek": "\u0172",
    "Utilde": "\u0168",
    "Umacron": "\u016a",
    "amacron": "\u0101",
    "iogonek": "\u012f",
    "eabovedot": "\u0117",
    "imacron": "\u012b",
    "ncedilla": "\u0146",
    "omacron": "\u014d",
    "kcedilla": "\u0137",
    "uogonek": "\u0173",
    "utilde": "\u0169",
    "umacron": "\u016b",
    "Wcircumflex": "\u0174",
    "wcircumflex": "\u0175",
    "Ycircumflex": "\u0176",
    "ycircumflex": "\u0177",
    "Babovedot": "\u1e02",
    "babovedot": "\u1e03",
    "Dabovedot": "\u1e0a",
    "dabovedot": "\u1e0b",
    "Fabovedot": "\u1e1e",
    "fabovedot": "\u1e1f",
    "Mabovedot": "\u1e40",
    "mabovedot": "\u1e41",
    "Pabovedot": "\u1e56",
    "pabovedot": "\u1e57",
    "Sabovedot": "\u1e60",
    "sabovedot": "\u1e61",
    "Tabovedot": "\u1e6a",
    "tabovedot": "\u1e6b",
    "Wgrave": "\u1e80",
    "wgrave": "\u1e81",
    "Wacute": "\u1e82",
    "wacute": "\u1e83",
    "Wdiaeresis": "\u1e84",
    "wdiaeresis": "\u1e85",
    "Ygrave": "\u1ef2",
    "ygrave": "\u1ef3",
    "OE": "\u0152",
    "oe": "\u0153",
    "Ydiaeresis": "\u0178",
    "overline": "\u203e",
    "kana_fullstop": "\u3002",
    "kana_openingbracket": "\u300c",
    "kana_closingbracket": "\u300d",
    "kana_comma": "\u3001",
    "kana_conjunctive": "\u30fb",
    "kana_WO": "\u30f2",
    "kana_a": "\u30a1",
    "kana_i": "\u30a3",
    "kana_u": "\u30a5",
    "kana_e": "\u30a7",
    "kana_o": "\u30a9",
    "kana_ya": "\u30e3",
    "kana_yu": "\u30e5",
    "kana_yo": "\u30e7",
    "kana_tsu": "\u30c3",
    "prolongedsound": "\u30fc",
    "kana_A": "\u30a2",
    "kana_I": "\u30a4",
    "kana_U": "\u30a6",
    "kana_E": "\u30a8",
    "kana_O": "\u30aa",
    "kana_KA": "\u30ab",
    "kana_KI": "\u30ad",
    "kana_KU": "\u30af",
    "kana_KE": "\u30b1",
    "kana_KO": "\u30b3",
    "kana_SA": "\u30b5",
    "kana_SHI": "\u30b7",
    "kana_SU": "\u30b9",
    "kana_SE": "\u30bb",
    "kana_SO": "\u30bd",
    "kana_TA": "\u30bf",
    "kana_CHI": "\u30c1",
    "kana_TSU": "\u30c4",
    "kana_TE": "\u30c6",
    "kana_TO": "\u30c8",
    "kana_NA": "\u30ca",
    "kana_NI": "\u30cb",
    "kana_NU": "\u30cc",
    "kana_NE": "\u30cd",
    "kana_NO": "\u30ce",
    "kana_HA": "\u30cf",
    "kana_HI": "\u30d2",
    "kana_FU": "\u30d5",
    "kana_HE": "\u30d8",
    "kana_HO": "\u30db",
    "kana_MA": "\u30de",
    "kana_MI": "\u30df",
    "kana_MU": "\u30e0",
    "kana_ME": "\u30e1",
    "kana_MO": "\u30e2",
    "kana_YA": "\u30e4",
    "kana_YU": "\u30e6",
    "kana_YO": "\u30e8",
    "kana_RA": "\u30e9",
    "kana_RI": "\u30ea",
    "kana_RU": "\u30eb",
    "kana_RE": "\u30ec",
    "kana_RO": "\u30ed",
    "kana_WA": "\u30ef",
    "kana_N": "\u30f3",
    "voicedsound": "\u309b",
    "semivoicedsound": "\u309c",
    "Farsi_0": "\u06f0",
    "Farsi_1": "\u06f1",
    "Farsi_2": "\u06f2",
    "Farsi_3": "\u06f3",
    "Farsi_4": "\u06f4",
    "Farsi_5": "\u06f5",
    "Farsi_6": "\u06f6",
    "Farsi_7": "\u06f7",
    "Farsi_8": "\u06f8",
    "Farsi_9": "\u06f9",
    "Arabic_percent": "\u066a",
    "Arabic_superscript_alef": "\u0670",
    "Arabic_tteh": "\u0679",
    "Arabic_peh": "\u067e",
    "Arabic_tcheh": "\u0686",
    "Arabic_ddal": "\u0688",
    "Arabic_rreh": "\u0691",
    "Arabic_comma": "\u060c",
    "Arabic_fullstop": "\u06d4",
    "Arabic_0": "\u0660",
    "Arabic_1": "\u0661",
    "Arabic_2": "\u0662",
    "Arabic_3": "\u0663",
    "Arabic_4": "\u0664",
    "Arabic_5": "\u0665",
    "Arabic_6": "\u0666",
    "Arabic_7": "\u0667",
    "Arabic_8": "\u0668",
    "Arabic_9": "\u0669",
    "Arabic_semicolon": "\u061b",
    "Arabic_question_mark": "\u061f",
    "Arabic_hamza": "\u0621",
    "Arabic_maddaonalef": "\u0622",
    "Arabic_hamzaonalef": "\u0623",
    "Arabic_hamzaonwaw": "\u0624",
    "Arabic_hamzaunderalef": "\u0625",
    "Arabic_hamzaonyeh": "\u0626",
    "Arabic_alef": "\u0627",
    "Arabic_beh": "\u0628",
    "Arabic_tehmarbuta": "\u0629",
    "Arabic_teh": "\u062a",
    "Arabic_theh": "\u062b",
    "Arabic_jeem": "\u062c",
    "Arabic_hah": "\u062d",
    "Arabic_khah": "\u062e",
    "Arabic_dal": "\u062f",
    "Arabic_thal": "\u0630",
    "Arabic_ra": "\u0631",
    "Arabic_zain": "\u0632",
    "Arabic_seen": "\u0633",
    "Arabic_sheen": "\u0634",
    "Arabic_sad": "\u0635",
    "Arabic_dad": "\u0636",
    "Arabic_tah": "\u0637",
    "Arabic_zah": "\u0638",
    "Arabic_ain": "\u0639",
    "Arabic_ghain": "\u063a",
    "Arabic_tatweel": "\u0640",
    "Arabic_feh": "\u0641",
    "Arabic_qaf": "\u0642",
    "Arabic_kaf": "\u0643",
    "Arabic_lam": "\u0644",
    "Arabic_meem": "\u0645",
    "Arabic_noon": "\u0646",
    "Arabic_ha": "\u0647",
    "Arabic_waw": "\u0648",
    "Arabic_alefmaksura": "\u0649",
    "Arabic_yeh": "\u064a",
    "Arabic_fathatan": "\u064b",
    "Arabic_dammatan": "\u064c",
    "Arabic_kasratan": "\u064d",
    "Arabic_fatha": "\u064e",
    "Arabic_damma": "\u064f",
    "Arabic_kasra": "\u0650",
    "Arabic_shadda": "\u0651",
    "Arabic_sukun": "\u0652",
    "Arabic_madda_above": "\u0653",
    "Arabic_hamza_above": "\u0654",
    "Arabic_hamza_below": "\u0655",
    "Arabic_jeh": "\u0698",
    "Arabic_veh": "\u06a4",
    "Arabic_keheh": "\u06a9",
    "Arabic_gaf": "\u06af",
    "Arabic_noon_ghunna": "\u06ba",
    "Arabic_heh_doachashmee": "\u06be",
    "Farsi_yeh": "\u06cc",
    "Arabic_farsi_yeh": "\u06cc",
    "Arabic_yeh_baree": "\u06d2",
    "Arabic_heh_goal": "\u06c1",
    "Cyrillic_GHE_bar": "\u0492",
    "Cyrillic_ghe_bar": "\u0493",
    "Cyrillic_ZHE_descender": "\u0496",
    "Cyrillic_zhe_descender": "\u0497",
    "Cyrillic_KA_descender": "\u049a",
    "Cyrillic_ka_descender": "\u049b",
    "Cyrillic_KA_vertstroke": "\u049c",
    "Cyrillic_ka_vertstroke": "\u049d",
    "Cyrillic_EN_descender": "\u04a2",
    "Cyrillic_en_descender": "\u04a3",
    "Cyrillic_U_straight": "\u04ae",
    "Cyrillic_u_straight": "\u04af",
    "Cyrillic_U_straight_bar": "\u04b0",
    "Cyrillic_u_straight_bar": "\u04b1",
    "Cyrillic_HA_descender": "\u04b2",
    "Cyrillic_ha_descender": "\u04b3",
    "Cyrillic_CHE_descender": "\u04b6",
    "Cyrillic_che_descender": "\u04b7",
    "Cyrillic_CHE_vertstroke": "\u04b8",
    "Cyrillic_che_vertstroke": "\u04b9",
    "Cyrillic_SHHA": "\u04ba",
    "Cyrillic_shha": "\u04bb",
    "Cyrillic_SCHWA": "\u04d8",
    "Cyrillic_schwa": "\u04d9",
    "Cyrillic_I_macron": "\u04e2",
    "Cyrillic_i_macron": "\u04e3",
    "Cyrillic_O_bar": "\u04e8",
    "Cyrillic_o_bar": "\u04e9",
    "Cyrillic_U_macron": "\u04ee",
    "Cyrillic_u_macron": "\u04ef",
    "Serbian_dje": "\u0452",
    "Macedonia_gje": "\u0453",
    "Cyrillic_io": "\u0451",
    "Ukrainian_ie": "\u0454",
    "Macedonia_dse": "\u0455",
    "Ukrainian_i": "\u0456",
    "Ukrainian_yi": "\u0457",
    "Cyrillic_je": "\u0458",
    "Cyrillic_lje": "\u0459",
    "Cyrillic_nje": "\u045a",
    "Serbian_tshe": "\u045b",
    "Macedonia_kje": "\u045c",
    "Ukrainian_ghe_with_upturn": "\u0491",
    "Byelorussian_shortu": "\u045e",
    "Cyrillic_dzhe": "\u045f",
    "numerosign": "\u2116",
    "Serbian_DJE": "\u0402",
    "Macedonia_GJE": "\u0403",
    "Cyrillic_IO": "\u0401",
    "Ukrainian_IE": "\u0404",
    "Macedonia_DSE": "\u0405",
    "Ukrainian_I": "\u0406",
    "Ukrainian_YI": "\u0407",
    "Cyrillic_JE": "\u0408",
    "Cyrillic_LJE": "\u0409",
    "Cyrillic_NJE": "\u040a",
    "Serbian_TSHE": "\u040b",
    "Macedonia_KJE": "\u040c",
    "Ukrainian_GHE_WITH_UPTURN": "\u0490",
    "Byelorussian_SHORTU": "\u040e",
    "Cyrillic_DZHE": "\u040f",
    "Cyrillic_yu": "\u044e",
    "Cyrillic_a": "\u0430",
    "Cyrillic_be": "\u0431",
    "Cyrillic_tse": "\u0446",
    "Cyrillic_de": "\u0434",
    "Cyrillic_ie": "\u0435",
    "Cyrillic_ef": "\u0444",
    "Cyrillic_ghe": "\u0433",
    "Cyrillic_ha": "\u0445",
    "Cyrillic_i": "\u0438",
    "Cyrillic_shorti": "\u0439",
    "Cyrillic_ka": "\u043a",
    "Cyrillic_el": "\u043b",
    "Cyrillic_em": "\u043c",
    "Cyrillic_en": "\u043d",
    "Cyrillic_o": "\u043e",
    "Cyrillic_pe": "\u043f",
    "Cyrillic_ya": "\u044f",
    "Cyrillic_er": "\u0440",
    "Cyrillic_es": "\u0441",
    "Cyrillic_te": "\u0442",
    "Cyrillic_u": "\u0443",
    "Cyrillic_zhe": "\u0436",
    "Cyrillic_ve": "\u0432",
    "Cyrillic_softsign": "\u044c",
    "Cyrillic_yeru": "\u044b",
    "Cyrillic_ze": "\u0437",
    "Cyrillic_sha": "\u0448",
    "Cyrillic_e": "\u044d",
    "Cyrillic_shcha": "\u0449",
    "Cyrillic_che": "\u0447",
    "Cyrillic_hardsign": "\u044a",
    "Cyrillic_YU": "\u042e",
    "Cyrillic_A": "\u0410",
    "Cyrillic_BE": "\u0411",
    "Cyrillic_TSE": "\u0426",
    "Cyrillic_DE": "\u0414",
    "Cyrillic_IE": "\u0415",
    "Cyrillic_EF": "\u0424",
    "Cyrillic_GHE": "\u0413",
    "Cyrillic_HA": "\u0425",
    "Cyrillic_I": "\u0418",
    "Cyrillic_SHORTI": "\u0419",
    "Cyrillic_KA": "\u041a",
    "Cyrillic_EL": "\u041b",
    "Cyrillic_EM": "\u041c",
    "Cyrillic_EN": "\u041d",
    "Cyrillic_O": "\u041e",
    "Cyrillic_PE": "\u041f",
    "Cyrillic_YA": "\u042f",
    "Cyrillic_ER": "\u0420",
    "Cyrillic_ES": "\u0421",
    "Cyrillic_TE": "\u0422",
    "Cyrillic_U": "\u0423",
    "Cyrillic_ZHE": "\u0416",
    "Cyrillic_VE": "\u0412",
    "Cyrillic_SOFTSIGN": "\u042c",
    "Cyrillic_YERU": "\u042b",
    "Cyrillic_ZE": "\u0417",
    "Cyrillic_SHA": "\u0428",
    "Cyrillic_E": "\u042d",
    "Cyrillic_SHCHA": "\u0429",
    "Cyrillic_CHE": "\u0427",
    "Cyrillic_HARDSIGN": "\u042a",
    "Greek_ALPHAaccent": "\u0386",
    "Greek_EPSILONaccent": "\u0388",
    "Greek_ETAaccent": "\u0389",
    "Greek_IOTAaccent": "\u038a",
    "Greek_IOTAdieresis": "\u03aa",
    "Greek_OMICRONaccent": "\u038c",
    "Greek_UPSILONaccent": "\u038e",
    "Greek_UPSILONdieresis": "\u03ab",
    "Greek_OMEGAaccent": "\u038f",
    "Greek_accentdieresis": "\u0385",
    "Greek_horizbar": "\u2015",
    "Greek_alphaaccent": "\u03ac",
    "Greek_epsilonaccent": "\u03ad",
    "Greek_etaaccent": "\u03ae",
    "Greek_iotaaccent": "\u03af",
    "Greek_iotadieresis": "\u03ca",
    "Greek_iotaaccentdieresis": "\u0390",
    "Greek_omicronaccent": "\u03cc",
    "Greek_upsilonaccent": "\u03cd",
    "Greek_upsilondieresis": "\u03cb",
    "Greek_upsilonaccentdieresis": "\u03b0",
    "Greek_omegaaccent": "\u03ce",
    "Greek_ALPHA": "\u0391",
    "Greek_BETA": "\u0392",
    "Greek_GAMMA": "\u0393",
    "Greek_DELTA": "\u0394",
    "Greek_EPSILON": "\u0395",
    "Greek_ZETA": "\u0396",
    "Greek_ETA": "\u0397",
    "Greek_THETA": "\u0398",
    "Greek_IOTA": "\u0399",
    "Greek_KAPPA": "\u039a",
    "Greek_LAMDA": "\u039b",
    "Greek_LAMBDA": "\u039b",
    "Greek_MU": "\u039c",
    "Greek_NU": "\u039d",
    "Greek_XI": "\u039e",
    "Greek_OMICRON": "\u039f",
    "Greek_PI": "\u03a0",
    "Greek_RHO": "\u03a1",
    "Greek_SIGMA": "\u03a3",
    "Greek_TAU": "\u03a4",
    "Greek_UPSILON": "\u03a5",
    "Greek_PHI": "\u03a6",
    "Greek_CHI": "\u03a7",
    "Greek_PSI": "\u03a8",
    "Greek_OMEGA": "\u03a9",
    "Greek_alpha": "\u03b1",
    "Greek_beta": "\u03b2",
    "Greek_gamma": "\u03b3",
    "Greek_delta": "\u03b4",
    "Greek_epsilon": "\u03b5",
    "Greek_zeta": "\u03b6",
    "Greek_eta": "\u03b7",
    "Greek_theta": "\u03b8",
    "Greek_iota": "\u03b9",
    "Greek_kappa": "\u03ba",
    "Greek_lamda": "\u03bb",
    "Greek_lambda": "\u03bb",
    "Greek_mu": "\u03bc",
    "Greek_nu": "\u03bd",
    "Greek_xi": "\u03be",
    "Greek_omicron": "\u03bf",
    "Greek_pi": "\u03c0",
    "Greek_rho": "\u03c1",
    "Greek_sigma": "\u03c3",
    "Greek_finalsmallsigma": "\u03c2",
    "Greek_tau": "\u03c4",
    "Greek_upsilon": "\u03c5",
    "Greek_phi": "\u03c6",
    "Greek_chi": "\u03c7",
    "Greek_psi": "\u03c8",
    "Greek_omega": "\u03c9",
    "leftradical": "\u23b7",
    "topleftradical": "\u250c",
    "horizconnector": "\u2500",
    "topintegral": "\u2320",
    "botintegral": "\u2321",
    "vertconnector": "\u2502",
    "topleftsqbracket": "\u23a1",
    "botleftsqbracket": "\u23a3",
    "toprightsqbracket": "\u23a4",
    "botrightsqbracket": "\u23a6",
    "topleftparens": "\u239b",
    "botleftparens": "\u239d",
    "toprightparens": "\u239e",
    "botrightparens": "\u23a0",
    "leftmiddlecurlybrace": "\u23a8",
    "rightmiddlecurlybrace": "\u23ac",
    "lessthanequal": "\u2264",
    "notequal": "\u2260",
    "greaterthanequal": "\u2265",
    "integral": "\u222b",
    "therefore": "\u2234",
    "variation": "\u221d",
    "infinity": "\u221e",
    "nabla": "\u2207",
    "approximate": "\u223c",
    "similarequal": "\u2243",
    "ifonlyif": "\u21d4",
    "implies": "\u21d2",
    "identical": "\u2261",
    "radical": "\u221a",
    "includedin": "\u2282",
    "includes": "\u2283",
    "intersection": "\u2229",
    "union": "\u222a",
    "logicaland": "\u2227",
    "logicalor": "\u2228",
    "partialderivative": "\u2202",
    "function": "\u0192",
    "leftarrow": "\u2190",
    "uparrow": "\u2191",
    "rightarrow": "\u2192",
    "downarrow": "\u2193",
    "soliddiamond": "\u25c6",
    "checkerboard": "\u2592",
    "ht": "\u2409",
    "ff": "\u240c",
    "cr": "\u240d",
    "lf": "\u240a",
    "nl": "\u2424",
    "vt": "\u240b",
    "lowrightcorner": "\u2518",
    "uprightcorner": "\u2510",
    "upleftcorner": "\u250c",
    "lowleftcorner": "\u2514",
    "crossinglines": "\u253c",
    "horizlinescan1": "\u23ba",
    "horizlinescan3": "\u23bb",
    "horizlinescan5": "\u2500",
    "horizlinescan7": "\u23bc",
    "horizlinescan9": "\u23bd",
    "leftt": "\u251c",
    "rightt": "\u2524",
    "bott": "\u2534",
    "topt": "\u252c",
    "vertbar": "\u2502",
    "emspace": "\u2003",
    "enspace": "\u2002",
    "em3space": "\u2004",
    "em4space": "\u2005",
    "digitspace": "\u2007",
    "punctspace": "\u2008",
    "thinspace": "\u2009",
    "hairspace": "\u200a",
    "emdash": "\u2014",
    "endash": "\u2013",
    "signifblank": "\u2423",
    "ellipsis": "\u2026",
    "doubbaselinedot": "\u2025",
    "onethird": "\u2153",
    "twothirds": "\u2154",
    "onefifth": "\u2155",
    "twofifths": "\u2156",
    "threefifths": "\u2157",
    "fourfifths": "\u2158",
    "onesixth": "\u2159",
    "fivesixths": "\u215a",
    "careof": "\u2105",
    "figdash": "\u2012",
    "leftanglebracket": "\u2329",
    "decimalpoint": "\u002e",
    "rightanglebracket": "\u232a",
    "oneeighth": "\u215b",
    "threeeighths": "\u215c",
    "fiveeighths": "\u215d",
    "seveneighths": "\u215e",
    "trademark": "\u2122",
    "signaturemark": "\u2613",
    "leftopentriangle": "\u25c1",
    "rightopentriangle": "\u25b7",
    "emopencircle": "\u25cb",
    "emopenrectangle": "\u25af",
    "leftsinglequotemark": "\u2018",
    "rightsinglequotemark": "\u2019",
    "leftdoublequotemark": "\u201c",
    "rightdoublequotemark": "\u201d",
    "prescription": "\u211e",
    "permille": "\u2030",
    "minutes": "\u2032",
    "seconds": "\u2033",
    "latincross": "\u271d",
    "filledrectbullet": "\u25ac",
    "filledlefttribullet": "\u25c0",
    "filledrighttribullet": "\u25b6",
    "emfilledcircle": "\u25cf",
    "emfilledrect": "\u25ae",
    "enopencircbullet": "\u25e6",
    "enopensquarebullet": "\u25ab",
    "openrectbullet": "\u25ad",
    "opentribulletup": "\u25b3",
    "opentribulletdown": "\u25bd",
    "openstar": "\u2606",
    "enfilledcircbullet": "\u2022",
    "enfilledsqbullet": "\u25aa",
    "filledtribulletup": "\u25b2",
    "filledtribulletdown": "\u25bc",
    "leftpointer": "\u261c",
    "rightpointer": "\u261e",
    "club": "\u2663",
    "diamond": "\u2666",
    "heart": "\u2665",
    "maltesecross": "\u2720",
    "dagger": "\u2020",
    "doubledagger": "\u2021",
    "checkmark": "\u2713",
    "ballotcross": "\u2717",
    "musicalsharp": "\u266f",
    "musicalflat": "\u266d",
    "malesymbol": "\u2642",
    "femalesymbol": "\u2640",
    "telephone": "\u260e",
    "telephonerecorder": "\u2315",
    "phonographcopyright": "\u2117",
    "caret": "\u2038",
    "singlelowquotemark": "\u201a",
    "doublelowquotemark": "\u201e",
    "leftcaret": "\u003c",
    "rightcaret": "\u003e",
    "downcaret": "\u2228",
    "upcaret": "\u2227",
    "overbar": "\u00af",
    "downtack": "\u22a4",
    "upshoe": "\u2229",
    "downstile": "\u230a",
    "underbar": "\u005f",
    "jot": "\u2218",
    "quad": "\u2395",
    "uptack": "\u22a5",
    "circle": "\u25cb",
    "upstile": "\u2308",
    "downshoe": "\u222a",
    "rightshoe": "\u2283",
    "leftshoe": "\u2282",
    "lefttack": "\u22a3",
    "righttack": "\u22a2",
    "hebrew_doublelowline": "\u2017",
    "hebrew_aleph": "\u05d0",
    "hebrew_bet": "\u05d1",
    "hebrew_gimel": "\u05d2",
    "hebrew_dalet": "\u05d3",
    "hebrew_he": "\u05d4",
    "hebrew_waw": "\u05d5",
    "hebrew_zain": "\u05d6",
    "hebrew_chet": "\u05d7",
    "hebrew_tet": "\u05d8",
    "hebrew_yod": "\u05d9",
    "hebrew_finalkaph": "\u05da",
    "hebrew_kaph": "\u05db",
    "hebrew_lamed": "\u05dc",
    "hebrew_finalmem": "\u05dd",
    "hebrew_mem": "\u05de",
    "hebrew_finalnun": "\u05df",
    "hebrew_nun": "\u05e0",
    "hebrew_samech": "\u05e1",
    "hebrew_ayin": "\u05e2",
    "hebrew_finalpe": "\u05e3",
    "hebrew_pe": "\u05e4",
    "hebrew_finalzade": "\u05e5",
    "hebrew_zade": "\u05e6",
    "hebrew_qoph": "\u05e7",
    "hebrew_resh": "\u05e8",
    "hebrew_shin": "\u05e9",
    "hebrew_taw": "\u05ea",
    "Thai_kokai": "\u0e01",
    "Thai_khokhai": "\u0e02",
    "Thai_khokhuat": "\u0e03",
    "Thai_khokhwai": "\u0e04",
    "Thai_khokhon": "\u0e05",
    "Thai_khorakhang": "\u0e06",
    "Thai_ngongu": "\u0e07",
    "Thai_chochan": "\u0e08",
    "Thai_choching": "\u0e09",
    "Thai_chochang": "\u0e0a",
    "Thai_soso": "\u0e0b",
    "Thai_chochoe": "\u0e0c",
    "Thai_yoying": "\u0e0d",
    "Thai_dochada": "\u0e0e",
    "Thai_topatak": "\u0e0f",
    "Thai_thothan": "\u0e10",
    "Thai_thonangmontho": "\u0e11",
    "Thai_thophuthao": "\u0e12",
    "Thai_nonen": "\u0e13",
    "Thai_dodek": "\u0e14",
    "Thai_totao": "\u0e15",
    "Thai_thothung": "\u0e16",
    "Thai_thothahan": "\u0e17",
    "Thai_thothong": "\u0e18",
    "Thai_nonu": "\u0e19",
    "Thai_bobaimai": "\u0e1a",
    "Thai_popla": "\u0e1b",
    "Thai_phophung": "\u0e1c",
    "Thai_fofa": "\u0e1d",
    "Thai_phophan": "\u0e1e",
    "Thai_fofan": "\u0e1f",
    "Thai_phosamphao": "\u0e20",
    "Thai_moma": "\u0e21",
    "Thai_yoyak": "\u0e22",
    "Thai_rorua": "\u0e23",
    "Thai_ru": "\u0e24",
    "Thai_loling": "\u0e25",
    "Thai_lu": "\u0e26",
    "Thai_wowaen": "\u0e27",
    "Thai_sosala": "\u0e28",
    "Thai_sorusi": "\u0e29",
    "Thai_sosua": "\u0e2a",
    "Thai_hohip": "\u0e2b",
    "Thai_lochula": "\u0e2c",
    "Thai_oang": "\u0e2d",
    "Thai_honokhuk": "\u0e2e",
    "Thai_paiyannoi": "\u0e2f",
    "Thai_saraa": "\u0e30",
    "Thai_maihanakat": "\u0e31",
    "Thai_saraaa": "\u0e32",
    "Thai_saraam": "\u0e33",
    "Thai_sarai": "\u0e34",
    "Thai_saraii": "\u0e35",
    "Thai_saraue": "\u0e36",
    "Thai_sarauee": "\u0e37",
    "Thai_sarau": "\u0e38",
    "Thai_sarauu": "\u0e39",
    "Thai_phinthu": "\u0e3a",
    "Thai_baht": "\u0e3f",
    "Thai_sarae": "\u0e40",
    "Thai_saraae": "\u0e41",
    "Thai_sarao": "\u0e42",
    "Thai_saraaimaimuan": "\u0e43",
    "Thai_saraaimaimalai": "\u0e44",
    "Thai_lakkhangyao": "\u0e45",
    "Thai_maiyamok": "\u0e46",
    "Thai_maitaikhu": "\u0e47",
    "Thai_maiek": "\u0e48",
    "Thai_maitho": "\u0e49",
    "Thai_maitri": "\u0e4a",
    "Thai_maichattawa": "\u0e4b",
    "Thai_thanthakhat": "\u0e4c",
    "Thai_nikhahit": "\u0e4d",
    "Thai_leksun": "\u0e50",
    "Thai_leknung": "\u0e51",
    "Thai_leksong": "\u0e52",
    "Thai_leksam": "\u0e53",
    "Thai_leksi": "\u0e54",
    "Thai_lekha": "\u0e55",
    "Thai_lekhok": "\u0e56",
    "Thai_lekchet": "\u0e57",
    "Thai_lekpaet": "\u0e58",
    "Thai_lekkao": "\u0e59",
    "Hangul_Kiyeog": "\u3131",
    "Hangul_SsangKiyeog": "\u3132",
    "Hangul_KiyeogSios": "\u3133",
    "Hangul_Nieun": "\u3134",
    "Hangul_NieunJieuj": "\u3135",
    "Hangul_NieunHieuh": "\u3136",
    "Hangul_Dikeud": "\u3137",
    "Hangul_SsangDikeud": "\u3138",
    "Hangul_Rieul": "\u3139",
    "Hangul_RieulKiyeog": "\u313a",
    "Hangul_RieulMieum": "\u313b",
    "Hangul_RieulPieub": "\u313c",
    "Hangul_RieulSios": "\u313d",
    "Hangul_RieulTieut": "\u313e",
    "Hangul_RieulPhieuf": "\u313f",
    "Hangul_RieulHieuh": "\u3140",
    "Hangul_Mieum": "\u3141",
    "Hangul_Pieub": "\u3142",
    "Hangul_SsangPieub": "\u3143",
    "Hangul_PieubSios": "\u3144",
    "Hangul_Sios": "\u3145",
    "Hangul_SsangSios": "\u3146",
    "Hangul_Ieung": "\u3147",
    "Hangul_Jieuj": "\u3148",
    "Hangul_SsangJieuj": "\u3149",
    "Hangul_Cieuc": "\u314a",
    "Hangul_Khieuq": "\u314b",
    "Hangul_Tieut": "\u314c",
    "Hangul_Phieuf": "\u314d",
    "Hangul_Hieuh": "\u314e",
    "Hangul_A": "\u314f",
    "Hangul_AE": "\u3150",
    "Hangul_YA": "\u3151",
    "Hangul_YAE": "\u3152",
    "Hangul_EO": "\u3153",
    "Hangul_E": "\u3154",
    "Hangul_YEO": "\u3155",
    "Hangul_YE": "\u3156",
    "Hangul_O": "\u3157",
    "Hangul_WA": "\u3158",
    "Hangul_WAE": "\u3159",
    "Hangul_OE": "\u315a",
    "Hangul_YO": "\u315b",
    "Hangul_U": "\u315c",
    "Hangul_WEO": "\u315d",
    "Hangul_WE": "\u315e",
    "Hangul_WI": "\u315f",
    "Hangul_YU": "\u3160",
    "Hangul_EU": "\u3161",
    "Hangul_YI": "\u3162",
    "Hangul_I": "\u3163",
    "Hangul_J_Kiyeog": "\u11a8",
    "Hangul_J_SsangKiyeog": "\u11a9",
    "Hangul_J_KiyeogSios": "\u11aa",
    "Hangul_J_Nieun": "\u11ab",
    "Hangul_J_NieunJieuj": "\u11ac",
    "Hangul_J_NieunHieuh": "\u11ad",
    "Hangul_J_Dikeud": "\u11ae",
    "Hangul_J_Rieul": "\u11af",
    "Hangul_J_RieulKiyeog": "\u11b0",
    "Hangul_J_RieulMieum": "\u11b1",
    "Hangul_J_RieulPieub": "\u11b2",
    "Hangul_J_RieulSios": "\u11b3",
    "Hangul_J_RieulTieut": "\u11b4",
    "Hangul_J_RieulPhieuf": "\u11b5",
    "Hangul_J_RieulHieuh": "\u11b6",
    "Hangul_J_Mieum": "\u11b7",
    "Hangul_J_Pieub": "\u11b8",
    "Hangul_J_PieubSios": "\u11b9",
    "Hangul_J_Sios": "\u11ba",
    "Hangul_J_SsangSios": "\u11bb",
    "Hangul_J_Ieung": "\u11bc",
    "Hangul_J_Jieuj": "\u11bd",
    "Hangul_J_Cieuc": "\u11be",
    "Hangul_J_Khieuq": "\u11bf",
    "Hangul_J_Tieut": "\u11c0",
    "Hangul_J_Phieuf": "\u11c1",
    "Hangul_J_Hieuh": "\u11c2",
    "Hangul_RieulYeorinHieuh": "\u316d",
    "Hangul_SunkyeongeumMieum": "\u3171",
    "Hangul_SunkyeongeumPieub": "\u3178",
    "Hangul_PanSios": "\u317f",
    "Hangul_KkogjiDalrinIeung": "\u3181",
    "Hangul_SunkyeongeumPhieuf": "\u3184",
    "Hangul_YeorinHieuh": "\u3186",
    "Hangul_AraeA": "\u318d",
    "Hangul_AraeAE": "\u318e",
    "Hangul_J_PanSios": "\u11eb",
    "Hangul_J_KkogjiDalrinIeung": "\u11f0",
    "Hangul_J_YeorinHieuh": "\u11f9",
    "Korean_Won": "\u20a9",
    "Armenian_ligature_ew": "\u0587",
    "Armenian_full_stop": "\u0589",
    "Armenian_verjaket": "\u0589",
    "Armenian_separation_mark": "\u055d",
    "Armenian_but": "\u055d",
    "Armenian_hyphen": "\u058a",
    "Armenian_yentamna": "\u058a",
    "Armenian_exclam": "\u055c",
    "Armenian_amanak": "\u055c",
    "Armenian_accent": "\u055b",
    "Armenian_shesht": "\u055b",
    "Armenian_question": "\u055e",
    "Armenian_paruyk": "\u055e",
    "Armenian_AYB": "\u0531",
    "Armenian_ayb": "\u0561",
    "Armenian_BEN": "\u0532",
    "Armenian_ben": "\u0562",
    "Armenian_GIM": "\u0533",
    "Armenian_gim": "\u0563",
    "Armenian_DA": "\u0534",
    "Armenian_da": "\u0564",
    "Armenian_YECH": "\u0535",
    "Armenian_yech": "\u0565",
    "Armenian_ZA": "\u0536",
    "Armenian_za": "\u0566",
    "Armenian_E": "\u0537",
    "Armenian_e": "\u0567",
    "Armenian_AT": "\u0538",
    "Armenian_at": "\u0568",
    "Armenian_TO": "\u0539",
    "Armenian_to": "\u0569",
    "Armenian_ZHE": "\u053a",
    "Armenian_zhe": "\u056a",
    "Armenian_INI": "\u053b",
    "Armenian_ini": "\u056b",
    "Armenian_LYUN": "\u053c",
    "Armenian_lyun": "\u056c",
    "Armenian_KHE": "\u053d",
    "Armenian_khe": "\u056d",
    "Armenian_TSA": "\u053e",
    "Armenian_tsa": "\u056e",
    "Armenian_KEN": "\u053f",
    "Armenian_ken": "\u056f",
    "Armenian_HO": "\u0540",
    "Armenian_ho": "\u0570",
    "Armenian_DZA": "\u0541",
    "Armenian_dza": "\u0571",
    "Armenian_GHAT": "\u0542",
    "Armenian_ghat": "\u0572",
    "Armenian_TCHE": "\u0543",
    "Armenian_tche": "\u0573",
    "Armenian_MEN": "\u0544",
    "Armenian_men": "\u0574",
    "Armenian_HI": "\u0545",
    "Armenian_hi": "\u0575",
    "Armenian_NU": "\u0546",
    "Armenian_nu": "\u0576",
    "Armenian_SHA": "\u0547",
    "Armenian_sha": "\u0577",
    "Armenian_VO": "\u0548",
    "Armenian_vo": "\u0578",
    "Armenian_CHA": "\u0549",
    "Armenian_cha": "\u0579",
    "Armenian_PE": "\u054a",
    "Armenian_pe": "\u057a",
    "Armenian_JE": "\u054b",
    "Armenian_je": "\u057b",
    "Armenian_RA": "\u054c",
    "Armenian_ra": "\u057c",
    "Armenian_SE": "\u054d",
    "Armenian_se": "\u057d",
    "Armenian_VEV": "\u054e",
    "Armenian_vev": "\u057e",
    "Armenian_TYUN": "\u054f",
    "Armenian_tyun": "\u057f",
    "Armenian_RE": "\u0550",
    "Armenian_re": "\u0580",
    "Armenian_TSO": "\u0551",
    "Armenian_tso": "\u0581",
    "Armenian_VYUN": "\u0552",
    "Armenian_vyun": "\u0582",
    "Armenian_PYUR": "\u0553",
    "Armenian_pyur": "\u0583",
    "Armenian_KE": "\u0554",
    "Armenian_ke": "\u0584",
    "Armenian_O": "\u0555",
    "Armenian_o": "\u0585",
    "Armenian_FE": "\u0556",
    "Armenian_fe": "\u0586",
    "Armenian_apostrophe": "\u055a",
    "Georgian_an": "\u10d0",
    "Georgian_ban": "\u10d1",
    "Georgian_gan": "\u10d2",
    "Georgian_don": "\u10d3",
    "Georgian_en": "\u10d4",
    "Georgian_vin": "\u10d5",
    "Georgian_zen": "\u10d6",
    "Georgian_tan": "\u10d7",
    "Georgian_in": "\u10d8",
    "Georgian_kan": "\u10d9",
    "Georgian_las": "\u10da",
    "Georgian_man": "\u10db",
    "Georgian_nar": "\u10dc",
    "Georgian_on": "\u10dd",
    "Georgian_par": "\u10de",
    "Georgian_zhar": "\u10df",
    "Georgian_rae": "\u10e0",
    "Georgian_san": "\u10e1",
    "Georgian_tar": "\u10e2",
    "Georgian_un": "\u10e3",
    "Georgian_phar": "\u10e4",
    "Georgian_khar": "\u10e5",
    "Georgian_ghan": "\u10e6",
    "Georgian_qar": "\u10e7",
    "Georgian_shin": "\u10e8",
    "Georgian_chin": "\u10e9",
    "Georgian_can": "\u10ea",
    "Georgian_jil": "\u10eb",
    "Georgian_cil": "\u10ec",
    "Georgian_char": "\u10ed",
    "Georgian_xan": "\u10ee",
    "Georgian_jhan": "\u10ef",
    "Georgian_hae": "\u10f0",
    "Georgian_he": "\u10f1",
    "Georgian_hie": "\u10f2",
    "Georgian_we": "\u10f3",
    "Georgian_har": "\u10f4",
    "Georgian_hoe": "\u10f5",
    "Georgian_fi": "\u10f6",
    "Xabovedot": "\u1e8a",
    "Ibreve": "\u012c",
    "Zstroke": "\u01b5",
    "Gcaron": "\u01e6",
    "Ocaron": "\u01d1",
    "Obarred": "\u019f",
    "xabovedot": "\u1e8b",
    "ibreve": "\u012d",
    "zstroke": "\u01b6",
    "gcaron": "\u01e7",
    "ocaron": "\u01d2",
    "obarred": "\u0275",
    "SCHWA": "\u018f",
    "schwa": "\u0259",
    "EZH": "\u01b7",
    "ezh": "\u0292",
    "Lbelowdot": "\u1e36",
    "lbelowdot": "\u1e37",
    "Abelowdot": "\u1ea0",
    "abelowdot": "\u1ea1",
    "Ahook": "\u1ea2",
    "ahook": "\u1ea3",
    "Acircumflexacute": "\u1ea4",
    "acircumflexacute": "\u1ea5",
    "Acircumflexgrave": "\u1ea6",
    "acircumflexgrave": "\u1ea7",
    "Acircumflexhook": "\u1ea8",
    "acircumflexhook": "\u1ea9",
    "Acircumflextilde": "\u1eaa",
    "acircumflextilde": "\u1eab",
    "Acircumflexbelowdot": "\u1eac",
    "acircumflexbelowdot": "\u1ead",
    "Abreveacute": "\u1eae",
    "abreveacute": "\u1eaf",
    "Abrevegrave": "\u1eb0",
    "abrevegrave": "\u1eb1",
    "Abrevehook": "\u1eb2",
    "abrevehook": "\u1eb3",
    "Abrevetilde": "\u1eb4",
    "abrevetilde": "\u1eb5",
    "Abrevebelowdot": "\u1eb6",
    "abrevebelowdot": "\u1eb7",
    "Ebelowdot": "\u1eb8",
    "ebelowdot": "\u1eb9",
    "Ehook": "\u1eba",
    "ehook": "\u1ebb",
    "Etilde": "\u1ebc",
    "etilde": "\u1ebd",
    "Ecircumflexacute": "\u1ebe",
    "ecircumflexacute": "\u1ebf",
    "Ecircumflexgrave": "\u1ec0",
    "ecircumflexgrave": "\u1ec1",
    "Ecircumflexhook": "\u1ec2",
    "ecircumflexhook": "\u1ec3",
    "Ecircumflextilde": "\u1ec4",
    "ecircumflextilde": "\u1ec5",
    "Ecircumflexbelowdot": "\u1ec6",
    "ecircumflexbelowdot": "\u1ec7",
    "Ihook": "\u1ec8",
    "ihook": "\u1ec9",
    "Ibelowdot": "\u1eca",
    "ibelowdot": "\u1ecb",
    "Obelowdot": "\u1ecc",
    "obelowdot": "\u1ecd",
    "Ohook": "\u1ece",
    "ohook": "\u1ecf",
    "Ocircumflexacute": "\u1ed0",
    "ocircumflexacute": "\u1ed1",
    "Ocircumflexgrave": "\u1ed2",
    "ocircumflexgrave": "\u1ed3",
    "Ocircumflexhook": "\u1ed4",
    "ocircumflexhook": "\u1ed5",
    "Ocircumflextilde": "\u1ed6",
    "ocircumflextilde": "\u1ed7",
    "Ocircumflexbelowdot": "\u1ed8",
    "ocircumflexbelowdot": "\u1ed9",
    "Ohornacute": "\u1eda",
    "ohornacute": "\u1edb",
    "Ohorngrave": "\u1edc",
    "ohorngrave": "\u1edd",
    "Ohornhook": "\u1ede",
    "ohornhook": "\u1edf",
    "Ohorntilde": "\u1ee0",
    "ohorntilde": "\u1ee1",
    "Ohornbelowdot": "\u1ee2",
    "ohornbelowdot": "\u1ee3",
    "Ubelowdot": "\u1ee4",
    "ubelowdot": "\u1ee5",
    "Uhook": "\u1ee6",
    "uhook": "\u1ee7",
    "Uhornacute": "\u1ee8",
    "uhornacute": "\u1ee9",
    "Uhorngrave": "\u1eea",
    "uhorngrave": "\u1eeb",
    "Uhornhook": "\u1eec",
    "uhornhook": "\u1eed",
    "Uhorntilde": "\u1eee",
    "uhorntilde": "\u1eef",
    "Uhornbelowdot": "\u1ef0",
    "uhornbelowdot": "\u1ef1",
    "Ybelowdot": "\u1ef4",
    "ybelowdot": "\u1ef5",
    "Yhook": "\u1ef6",
    "yhook": "\u1ef7",
    "Ytilde": "\u1ef8",
    "ytilde": "\u1ef9",
    "Ohorn": "\u01a0",
    "ohorn": "\u01a1",
    "Uhorn": "\u01af",
    "uhorn": "\u01b0",
    "combining_tilde": "\u0303",
    "combining_grave": "\u0300",
    "combining_acute": "\u0301",
    "combining_hook": "\u0309",
    "combining_belowdot": "\u0323",
    "EcuSign": "\u20a0",
    "ColonSign": "\u20a1",
    "CruzeiroSign": "\u20a2",
    "FFrancSign": "\u20a3",
    "LiraSign": "\u20a4",
    "MillSign": "\u20a5",
    "NairaSign": "\u20a6",
    "PesetaSign": "\u20a7",
    "RupeeSign": "\u20a8",
    "WonSign": "\u20a9",
    "NewSheqelSign": "\u20aa",
    "DongSign": "\u20ab",
    "EuroSign": "\u20ac",
    "zerosuperior": "\u2070",
    "foursuperior": "\u2074",
    "fivesuperior": "\u2075",
    "sixsuperior": "\u2076",
    "sevensuperior": "\u2077",
    "eightsuperior": "\u2078",
    "ninesuperior": "\u2079",
    "zerosubscript": "\u2080",
    "onesubscript": "\u2081",
    "twosubscript": "\u2082",
    "threesubscript": "\u2083",
    "foursubscript": "\u2084",
    "fivesubscript": "\u2085",
    "sixsubscript": "\u2086",
    "sevensubscript": "\u2087",
    "eightsubscript": "\u2088",
    "ninesubscript": "\u2089",
    "partdifferential": "\u2202",
    "emptyset": "\u2205",
    "elementof": "\u2208",
    "notelementof": "\u2209",
    "containsas": "\u220b",
    "squareroot": "\u221a",
    "cuberoot": "\u221b",
    "fourthroot": "\u221c",
    "dintegral": "\u222c",
    "tintegral": "\u222d",
    "because": "\u2235",
    "approxeq": "\u2248",
    "notapproxeq": "\u2247",
    "notidentical": "\u2262",
    "stricteq": "\u2263",
    "braille_blank": "\u2800",
    "braille_dots_1": "\u2801",
    "braille_dots_2": "\u2802",
    "braille_dots_12": "\u2803",
    "braille_dots_3": "\u2804",
    "braille_dots_13": "\u2805",
    "braille_dots_23": "\u2806",
    "braille_dots_123": "\u2807",
    "braille_dots_4": "\u2808",
    "braille_dots_14": "\u2809",
    "braille_dots_24": "\u280a",
    "braille_dots_124": "\u280b",
    "braille_dots_34": "\u280c",
    "braille_dots_134": "\u280d",
    "braille_dots_234": "\u280e",
    "braille_dots_1234": "\u280f",
    "braille_dots_5": "\u2810",
    "braille_dots_15": "\u2811",
    "braille_dots_25": "\u2812",
    "braille_dots_125": "\u2813",
    "braille_dots_35": "\u2814",
    "braille_dots_135": "\u2815",
    "braille_dots_235": "\u2816",
    "braille_dots_1235": "\u2817",
    "braille_dots_45": "\u2818",
    "braille_dots_145": "\u2819",
    "braille_dots_245": "\u281a",
    "braille_dots_1245": "\u281b",
    "braille_dots_345": "\u281c",
    "braille_dots_1345": "\u281d",
    "braille_dots_2345": "\u281e",
    "braille_dots_12345": "\u281f",
    "braille_dots_6": "\u2820",
    "braille_dots_16": "\u2821",
    "braille_dots_26": "\u2822",
    "braille_dots_126": "\u2823",
    "braille_dots_36": "\u2824",
    "braille_dots_136": "\u2825",
    "braille_dots_236": "\u2826",
    "braille_dots_1236": "\u2827",
    "braille_dots_46": "\u2828",
    "braille_dots_146": "\u2829",
    "braille_dots_246": "\u282a",
    "braille_dots_1246": "\u282b",
    "braille_dots_346": "\u282c",
    "braille_dots_1346": "\u282d",
    "braille_dots_2346": "\u282e",
    "braille_dots_12346": "\u282f",
    "braille_dots_56": "\u2830",
    "braille_dots_156": "\u2831",
    "braille_dots_256": "\u2832",
    "braille_dots_1256": "\u2833",
    "braille_dots_356": "\u2834",
    "braille_dots_1356": "\u2835",
    "braille_dots_2356": "\u2836",
    "braille_dots_12356": "\u2837",
    "braille_dots_456": "\u2838",
    "braille_dots_1456": "\u2839",
    "braille_dots_2456": "\u283a",
    "braille_dots_12456": "\u283b",
    "braille_dots_3456": "\u283c",
    "braille_dots_13456": "\u283d",
    "braille_dots_23456": "\u283e",
    "braille_dots_123456": "\u283f",
    "braille_dots_7": "\u2840",
    "braille_dots_17": "\u2841",
    "braille_dots_27": "\u2842",
    "braille_dots_127": "\u2843",
    "braille_dots_37": "\u2844",
    "braille_dots_137": "\u2845",
    "braille_dots_237": "\u2846",
    "braille_dots_1237": "\u2847",
    "braille_dots_47": "\u2848",
    "braille_dots_147": "\u2849",
    "braille_dots_247": "\u284a",
    "braille_dots_1247": "\u284b",
    "braille_dots_347": "\u284c",
    "braille_dots_1347": "\u284d",
    "braille_dots_2347": "\u284e",
    "braille_dots_12347": "\u284f",
    "braille_dots_57": "\u2850",
    "braille_dots_157": "\u2851",
    "braille_dots_257": "\u2852",
    "braille_dots_1257": "\u2853",
    "braille_dots_357": "\u2854",
    "braille_dots_1357": "\u2855",
    "braille_dots_2357": "\u2856",
    "braille_dots_12357": "\u2857",
    "braille_dots_457": "\u2858",
    "braille_dots_1457": "\u2859",
    "braille_dots_2457": "\u285a",
    "braille_dots_12457": "\u285b",
    "braille_dots_3457": "\u285c",
    "braille_dots_13457": "\u285d",
    "braille_dots_23457": "\u285e",
    "braille_dots_123457": "\u285f",
    "braille_dots_67": "\u2860",
    "braille_dots_167": "\u2861",
    "braille_dots_267": "\u2862",
    "braille_dots_1267": "\u2863",
    "braille_dots_367": "\u2864",
    "braille_dots_1367": "\u2865",
    "braille_dots_2367": "\u2866",
    "braille_dots_12367": "\u2867",
    "braille_dots_467": "\u2868",
    "braille_dots_1467": "\u2869",
    "braille_dots_2467": "\u286a",
    "braille_dots_12467": "\u286b",
    "braille_dots_3467": "\u286c",
    "braille_dots_13467": "\u286d",
    "braille_dots_23467": "\u286e",
    "braille_dots_123467": "\u286f",
    "braille_dots_567": "\u2870",
    "braille_dots_1567": "\u2871",
    "braille_dots_2567": "\u2872",
    "braille_dots_12567": "\u2873",
    "braille_dots_3567": "\u2874",
    "braille_dots_13567": "\u2875",
    "braille_dots_23567": "\u2876",
    "braille_dots_123567": "\u2877",
    "braille_dots_4567": "\u2878",
    "braille_dots_14567": "\u2879",
    "braille_dots_24567": "\u287a",
    "braille_dots_124567": "\u287b",
    "braille_dots_34567": "\u287c",
    "braille_dots_134567": "\u287d",
    "braille_dots_234567": "\u287e",
    "braille_dots_1234567": "\u287f",
    "braille_dots_8": "\u2880",
    "braille_dots_18": "\u2881",
    "braille_dots_28": "\u2882",
    "braille_dots_128": "\u2883",
    "braille_dots_38": "\u2884",
    "braille_dots_138": "\u2885",
    "braille_dots_238": "\u2886",
    "braille_dots_1238": "\u2887",
    "braille_dots_48": "\u2888",
    "braille_dots_148": "\u2889",
    "braille_dots_248": "\u288a",
    "braille_dots_1248": "\u288b",
    "braille_dots_348": "\u288c",
    "braille_dots_1348": "\u288d",
    "braille_dots_2348": "\u288e",
    "braille_dots_12348": "\u288f",
    "braille_dots_58": "\u2890",
    "braille_dots_158": "\u2891",
    "braille_dots_258": "\u2892",
    "braille_dots_1258": "\u2893",
    "braille_dots_358": "\u2894",
    "braille_dots_1358": "\u2895",
    "braille_dots_2358": "\u2896",
    "braille_dots_12358": "\u2897",
    "braille_dots_458": "\u2898",
    "braille_dots_1458": "\u2899",
    "braille_dots_2458": "\u289a",
    "braille_dots_12458": "\u289b",
    "braille_dots_3458": "\u289c",
    "braille_dots_13458": "\u289d",
    "braille_dots_23458": "\u289e",
    "braille_dots_123458": "\u289f",
    "braille_dots_68": "\u28a0",
    "braille_dots_168": "\u28a1",
    "braille_dots_268": "\u28a2",
    "braille_dots_1268": "\u28a3",
    "braille_dots_368": "\u28a4",
    "braille_dots_1368": "\u28a5",
    "braille_dots_2368": "\u28a6",
    "braille_dots_12368": "\u28a7",
    "braille_dots_468": "\u28a8",
    "braille_dots_1468": "\u28a9",
    "braille_dots_2468": "\u28aa",
    "braille_dots_12468": "\u28ab",
    "braille_dots_3468": "\u28ac",
    "braille_dots_13468": "\u28ad",
    "braille_dots_23468": "\u28ae",
    "braille_dots_123468": "\u28af",
    "braille_dots_568": "\u28b0",
    "braille_dots_1568": "\u28b1",
    "braille_dots_2568": "\u28b2",
    "braille_dots_12568": "\u28b3",
    "braille_dots_3568": "\u28b4",
    "braille_dots_13568": "\u28b5",
    "braille_dots_23568": "\u28b6",
    "braille_dots_123568": "\u28b7",
    "braille_dots_4568": "\u28b8",
    "braille_dots_14568": "\u28b9",
    "braille_dots_24568": "\u28ba",
    "braille_dots_124568": "\u28bb",
    "braille_dots_34568": "\u28bc",
    "braille_dots_134568": "\u28bd",
    "braille_dots_234568": "\u28be",
    "braille_dots_1234568": "\u28bf",
    "braille_dots_78": "\u28c0",
    "braille_dots_178": "\u28c1",
    "braille_dots_278": "\u28c2",
    "braille_dots_1278": "\u28c3",
    "braille_dots_378": "\u28c4",
    "braille_dots_1378": "\u28c5",
    "braille_dots_2378": "\u28c6",
    "braille_dots_12378": "\u28c7",
    "braille_dots_478": "\u28c8",
    "braille_dots_1478": "\u28c9",
    "braille_dots_2478": "\u28ca",
    "braille_dots_12478": "\u28cb",
    "braille_dots_3478": "\u28cc",
    "braille_dots_13478": "\u28cd",
    "braille_dots_23478": "\u28ce",
    "braille_dots_123478": "\u28cf",
    "braille_dots_578": "\u28d0",
    "braille_dots_1578": "\u28d1",
    "braille_dots_2578": "\u28d2",
    "braille_dots_12578": "\u28d3",
    "braille_dots_3578": "\u28d4",
    "braille_dots_13578": "\u28d5",
    "braille_dots_23578": "\u28d6",
    "braille_dots_123578": "\u28d7",
    "braille_dots_4578": "\u28d8",
    "braille_dots_14578": "\u28d9",
    "braille_dots_24578": "\u28da",
    "braille_dots_124578": "\u28db",
    "braille_dots_34578": "\u28dc",
    "braille_dots_134578": "\u28dd",
    "braille_dots_234578": "\u28de",
    "braille_dots_1234578": "\u28df",
    "braille_dots_678": "\u28e0",
    "braille_dots_1678": "\u28e1",
    "braille_dots_2678": "\u28e2",
    "braille_dots_12678": "\u28e3",
    "braille_dots_3678": "\u28e4",
    "braille_dots_13678": "\u28e5",
    "braille_dots_23678": "\u28e6",
    "braille_dots_123678": "\u28e7",
    "braille_dots_4678": "\u28e8",
    "braille_dots_14678": "\u28e9",
    "braille_dots_24678": "\u28ea",
    "braille_dots_124678": "\u28eb",
    "braille_dots_34678": "\u28ec",
    "braille_dots_134678": "\u28ed",
    "braille_dots_234678": "\u28ee",
    "braille_dots_1234678": "\u28ef",
    "braille_dots_5678": "\u28f0",
    "braille_dots_15678": "\u28f1",
    "braille_dots_25678": "\u28f2",
    "braille_dots_125678": "\u28f3",
    "braille_dots_35678": "\u28f4",
    "braille_dots_135678": "\u28f5",
    "braille_dots_235678": "\u28f6",
    "braille_dots_1235678": "\u28f7",
    "braille_dots_45678": "\u28f8",
    "braille_dots_145678": "\u28f9",
    "braille_dots_245678": "\u28fa",
    "braille_dots_1245678": "\u28fb",
    "braille_dots_345678": "\u28fc",
    "braille_dots_1345678": "\u28fd",
    "braille_dots_2345678": "\u28fe",
    "braille_dots_12345678": "\u28ff",
    "Sinh_ng": "\u0d82",
    "Sinh_h2": "\u0d83",
    "Sinh_a": "\u0d85",
    "Sinh_aa": "\u0d86",
    "Sinh_ae": "\u0d87",
    "Sinh_aee": "\u0d88",
    "Sinh_i": "\u0d89",
    "Sinh_ii": "\u0d8a",
    "Sinh_u": "\u0d8b",
    "Sinh_uu": "\u0d8c",
    "Sinh_ri": "\u0d8d",
    "Sinh_rii": "\u0d8e",
    "Sinh_lu": "\u0d8f",
    "Sinh_luu": "\u0d90",
    "Sinh_e": "\u0d91",
    "Sinh_ee": "\u0d92",
    "Sinh_ai": "\u0d93",
    "Sinh_o": "\u0d94",
    "Sinh_oo": "\u0d95",
    "Sinh_au": "\u0d96",
    "Sinh_ka": "\u0d9a",
    "Sinh_kha": "\u0d9b",
    "Sinh_ga": "\u0d9c",
    "Sinh_gha": "\u0d9d",
    "Sinh_ng2": "\u0d9e",
    "Sinh_nga": "\u0d9f",
    "Sinh_ca": "\u0da0",
    "Sinh_cha": "\u0da1",
    "Sinh_ja": "\u0da2",
    "Sinh_jha": "\u0da3",
    "Sinh_nya": "\u0da4",
    "Sinh_jnya": "\u0da5",
    "Sinh_nja": "\u0da6",
    "Sinh_tta": "\u0da7",
    "Sinh_ttha": "\u0da8",
    "Sinh_dda": "\u0da9",
    "Sinh_ddha": "\u0daa",
    "Sinh_nna": "\u0dab",
    "Sinh_ndda": "\u0dac",
    "Sinh_tha": "\u0dad",
    "Sinh_thha": "\u0dae",
    "Sinh_dha": "\u0daf",
    "Sinh_dhha": "\u0db0",
    "Sinh_na": "\u0db1",
    "Sinh_ndha": "\u0db3",
    "Sinh_pa": "\u0db4",
    "Sinh_pha": "\u0db5",
    "Sinh_ba": "\u0db6",
    "Sinh_bha": "\u0db7",
    "Sinh_ma": "\u0db8",
    "Sinh_mba": "\u0db9",
    "Sinh_ya": "\u0dba",
    "Sinh_ra": "\u0dbb",
    "Sinh_la": "\u0dbd",
    "Sinh_va": "\u0dc0",
    "Sinh_sha": "\u0dc1",
    "Sinh_ssha": "\u0dc2",
    "Sinh_sa": "\u0dc3",
    "Sinh_ha": "\u0dc4",
    "Sinh_lla": "\u0dc5",
    "Sinh_fa": "\u0dc6",
    "Sinh_al": "\u0dca",
    "Sinh_aa2": "\u0dcf",
    "Sinh_ae2": "\u0dd0",
    "Sinh_aee2": "\u0dd1",
    "Sinh_i2": "\u0dd2",
    "Sinh_ii2": "\u0dd3",
    "Sinh_u2": "\u0dd4",
    "Sinh_uu2": "\u0dd6",
    "Sinh_ru2": "\u0dd8",
    "Sinh_e2": "\u0dd9",
    "Sinh_ee2": "\u0dda",
    "Sinh_ai2": "\u0ddb",
    "Sinh_o2": "\u0ddc",
    "Sinh_oo2": "\u0ddd",
    "Sinh_au2": "\u0dde",
    "Sinh_lu2": "\u0ddf",
    "Sinh_ruu2": "\u0df2",
    "Sinh_luu2": "\u0df3",
    "Sinh_kunddaliya": "\u0df4",
}
