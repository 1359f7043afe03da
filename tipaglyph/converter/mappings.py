# TIPA mappings: static lookup tables, built once at import and never mutated.

import string
from types import MappingProxyType

# Shortcut characters (single ASCII key -> IPA glyph)
SHORTCUT_MAP = MappingProxyType(
    {
        # numerals
        "0": "u",
        "1": "i",
        "2": "a",
        "3": "ɛ",
        "4": "ɔ",
        "5": "ɐ",
        "6": "ɒ",
        "7": "ɤ",
        "8": "ɵ",
        "9": "ɘ",
        # uppercase letters
        "A": "ɑ",
        "B": "β",
        "C": "ç",
        "D": "ð",
        "E": "ɛ",
        "F": "ɱ",
        "G": "ɣ",
        "H": "ɥ",
        "I": "ɪ",
        "J": "ɲ",
        "K": "ɬ",
        "L": "ʎ",
        "M": "ɯ",
        "N": "ŋ",
        "O": "ɔ",
        "P": "ʋ",
        "Q": "ɒ",
        "R": "ʁ",
        "S": "ʃ",
        "T": "θ",
        "U": "ʊ",
        "V": "ʑ",
        "W": "ʝ",
        "X": "χ",
        "Y": "ʏ",
        "Z": "ʒ",
        # punctuation
        "@": "ə",
        "!": "ǀ",
        '"': "ˈ",
        "%": "ˌ",
        ":": "ː",
        ";": "ˑ",
        "?": "ʔ",
    }
)

# Stress marks always applied in block mode
STRESS_MARKS = MappingProxyType({'"': "ˈ", "%": "ˌ"})

# Long-form commands, keyed by the command name without the backslash
LONG_FORM_MAP = MappingProxyType(
    {
        # vowels
        "textturna": "ɐ",
        "textscripta": "ɑ",
        "textturnscripta": "ɒ",
        "textopeno": "ɔ",
        "textschwa": "ə",
        "textepsilon": "ɛ",
        "textreve": "ɘ",
        "textrevepsilon": "ɜ",
        "textturnv": "ʌ",
        "textramshorns": "ɤ",
        "textbaru": "ʉ",
        "textupsilon": "ʊ",
        # consonants
        "texthtb": "ɓ",
        "texthtd": "ɗ",
        "texthtg": "ɠ",
        "texthtbarlessj": "ʄ",
        "textrtaild": "ɖ",
        "textrtailt": "ʈ",
        "textrtails": "ʂ",
        "textrtailz": "ʐ",
        "textrtailr": "ɽ",
        "textrtailn": "ɳ",
        "textltailn": "ɲ",
        "textltailm": "ɱ",
        "textbeltl": "ɬ",
        "textlyoghlig": "ɮ",
        "textturnr": "ɹ",
        "textturnrrtail": "ɻ",
        "textturnlonglegr": "ɺ",
        "textfishhookr": "ɾ",
        "textinvscr": "ʁ",
        "textctc": "ɕ",
        "textctj": "ʑ",
        "textctz": "ʓ",
        "textctesh": "ɧ",
        "textdyoghlig": "ʤ",
        "textteshlig": "ʧ",
        # greek letters and special symbols
        "textbeta": "β",
        "texttheta": "θ",
        "textphi": "ɸ",
        "textchi": "χ",
        "textgamma": "ɣ",
        "textyogh": "ʒ",
        "textesh": "ʃ",
        "textthorn": "þ",
        # small capitals
        "textscb": "ʙ",
        "textscg": "ɢ",
        "textsch": "ʜ",
        "textsci": "ɪ",
        "textscl": "ʟ",
        "textscm": "ᴍ",
        "textscn": "ɴ",
        "textscr": "ʀ",
        "textscy": "ʏ",
        "textscu": "ʊ",
        # diacritics (combining marks stand alone here)
        "textprimstress": "ˈ",
        "textsecstress": "ˌ",
        "textlengthmark": "ː",
        "texthalflength": "ˑ",
        "textcorner": "ʼ",
        "textsubring": "\u0325",
        "textsubwedge": "\u032c",
        "textsubbar": "\u0329",
        "textsubumlaut": "\u0324",
        "textsubtilde": "\u0330",
        "textsubdot": "\u0323",
        "textraising": "\u031d",
        "textlowering": "\u031e",
        "textadvancing": "\u031f",
        "textretracting": "\u0320",
        "textsyllabic": "\u0329",
        "textnonsyllabic": "\u032f",
        # suprasegmentals
        "textvertline": "|",
        "textdoublevertline": "‖",
        "textbottomtiebar": "‿",
        "textdownstep": "↓",
        "textupstep": "↑",
        # extended IPA
        "textdoublebarpipe": "ǁ",
        "textdoublepipe": "‖",
        "textpipe": "|",
        # ligatures
        "textaolig": "ꜵ",
        "textoelig": "œ",
        "textscoelig": "ɶ",
    }
)

# Canonical \tone{NN} contour codes
TONE_MAP = MappingProxyType(
    {
        "11": "˩",
        "22": "˨",
        "33": "˧",
        "44": "˦",
        "55": "˥",
        "13": "˩˧",
        "15": "˩˥",
        "24": "˨˦",
        "31": "˧˩",
        "35": "˧˥",
        "42": "˦˨",
        "51": "˥˩",
        "53": "˥˧",
    }
)

# Pitch height (1 = extra low, 5 = extra high) -> tone bar
TONE_BARS = MappingProxyType({"1": "˩", "2": "˨", "3": "˧", "4": "˦", "5": "˥"})

# \* : turned letters and other symbols
TURNED_MAP = MappingProxyType(
    {
        "f": "ɟ",
        "k": "ʞ",
        "r": "ɹ",
        "t": "ʇ",
        "w": "ʍ",
        "j": "ʄ",
        "n": "ɲ",
        "h": "ħ",
        "l": "ɺ",
        "z": "ʐ",
    }
)

# \; : small capitals
SMALLCAP_MAP = MappingProxyType(
    {
        "A": "ᴀ",
        "B": "ʙ",
        "E": "ᴇ",
        "G": "ɢ",
        "H": "ʜ",
        "I": "ɪ",
        "L": "ʟ",
        "M": "ᴍ",
        "N": "ɴ",
        "O": "ᴏ",
        "R": "ʀ",
        "U": "ᴜ",
        "W": "ᴡ",
        "Y": "ʏ",
    }
)

# \: : retroflex letters
RETROFLEX_MAP = MappingProxyType(
    {"d": "ɖ", "l": "ɭ", "n": "ɳ", "r": "ɽ", "s": "ʂ", "z": "ʐ", "t": "ʈ"}
)

# \! : implosives and clicks
IMPLOSIVE_MAP = MappingProxyType(
    {"b": "ɓ", "d": "ɗ", "g": "ɠ", "j": "ʄ", "G": "ʛ", "o": "ʘ"}
)

MACRO_TABLES = MappingProxyType(
    {
        "*": TURNED_MAP,
        ";": SMALLCAP_MAP,
        ":": RETROFLEX_MAP,
        "!": IMPLOSIVE_MAP,
    }
)

# Accent macro -> combining mark (placed after the base character)
DIACRITIC_MAP = MappingProxyType(
    {
        "'": "\u0301",  # acute
        "`": "\u0300",  # grave
        "^": "\u0302",  # circumflex
        '"': "\u0308",  # diaeresis
        "~": "\u0303",  # tilde
        "=": "\u0304",  # macron
        "u": "\u0306",  # breve
        ".": "\u0307",  # dot above
        "c": "\u0327",  # cedilla
        "k": "\u0328",  # ogonek
        "r": "\u030a",  # ring above
        "v": "\u030c",  # caron
    }
)

# Precomposed vowel symbols accepted as diacritic bases besides ASCII letters
IPA_VOWEL_BASES = "əæøɑɔɛɪʊʌɐɒɘɜɤɯʉʏ"
DIACRITIC_BASES = frozenset(string.ascii_letters + IPA_VOWEL_BASES)

# Wrapper commands delimiting transcription regions: name -> (open, close)
WRAPPER_COMMANDS = MappingProxyType(
    {
        "tipa": ("", ""),
        "textipa": ("", ""),
        "nt": ("[", "]"),
        "wt": ("/", "/"),
    }
)

# q and the uppercase alphabet have no standard superscript form
SUPERSCRIPT_MAP = MappingProxyType(
    {
        "0": "⁰",
        "1": "¹",
        "2": "²",
        "3": "³",
        "4": "⁴",
        "5": "⁵",
        "6": "⁶",
        "7": "⁷",
        "8": "⁸",
        "9": "⁹",
        "+": "⁺",
        "-": "⁻",
        "=": "⁼",
        "(": "⁽",
        ")": "⁾",
        "a": "ᵃ",
        "b": "ᵇ",
        "c": "ᶜ",
        "d": "ᵈ",
        "e": "ᵉ",
        "f": "ᶠ",
        "g": "ᵍ",
        "h": "ʰ",
        "i": "ⁱ",
        "j": "ʲ",
        "k": "ᵏ",
        "l": "ˡ",
        "m": "ᵐ",
        "n": "ⁿ",
        "o": "ᵒ",
        "p": "ᵖ",
        "r": "ʳ",
        "s": "ˢ",
        "t": "ᵗ",
        "u": "ᵘ",
        "v": "ᵛ",
        "w": "ʷ",
        "x": "ˣ",
        "y": "ʸ",
        "z": "ᶻ",
    }
)

# str.translate tables
SHORTCUT_TRANSLATE_MAP = str.maketrans(dict(SHORTCUT_MAP))
BLOCK_TRANSLATE_MAP = str.maketrans({**SHORTCUT_MAP, **STRESS_MARKS})
SUPERSCRIPT_TRANSLATE_MAP = str.maketrans(dict(SUPERSCRIPT_MAP))
