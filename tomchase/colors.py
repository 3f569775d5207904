"""Named X11 colours as used by XPM colour definitions."""

from __future__ import annotations

from collections.abc import Iterator

# Each entry lists one or more names followed by their 0xRRGGBB value.
_NAMED: tuple[tuple[str | int, ...], ...] = (
    ("snow", 0xFFFAFA),
    ("ghost white", "ghostwhite", 0xF8F8FF),
    ("white smoke", "whitesmoke", 0xF5F5F5),
    ("gainsboro", 0xDCDCDC),
    ("floral white", "floralwhite", 0xFFFAF0),
    ("old lace", "oldlace", 0xFDF5E6),
    ("linen", 0xFAF0E6),
    ("antique white", "antiquewhite", 0xFAEBD7),
    ("papaya whip", "papayawhip", 0xFFEFD5),
    ("blanched almond", "blanchedalmond", 0xFFEBCD),
    ("bisque", 0xFFE4C4),
    ("peach puff", "peachpuff", 0xFFDAB9),
    ("navajo white", "navajowhite", 0xFFDEAD),
    ("moccasin", 0xFFE4B5),
    ("cornsilk", 0xFFF8DC),
    ("ivory", 0xFFFFF0),
    ("lemon chiffon", "lemonchiffon", 0xFFFACD),
    ("seashell", 0xFFF5EE),
    ("honeydew", 0xF0FFF0),
    ("mint cream", "mintcream", 0xF5FFFA),
    ("azure", 0xF0FFFF),
    ("alice blue", "aliceblue", 0xF0F8FF),
    ("lavender", 0xE6E6FA),
    ("lavender blush", "lavenderblush", 0xFFF0F5),
    ("misty rose", "mistyrose", 0xFFE4E1),
    ("white", 0xFFFFFF),
    ("black", 0x0),
    ("dark slate", "darkslategray", "darkslategrey", 0x2F4F4F),
    ("dim gray", "dimgray", "dim grey", "dimgrey", 0x696969),
    ("slate gray", "slategray", "slate grey", "slategrey", 0x708090),
    ("light slate", "lightslategray", "lightslategrey", 0x778899),
    ("gray", "grey", 0xBEBEBE),
    ("light grey", "lightgrey", "light gray", "lightgray", 0xD3D3D3),
    ("midnight blue", "midnightblue", 0x191970),
    ("navy", "navy blue", "navyblue", 0x80),
    ("cornflower blue", "cornflowerblue", 0x6495ED),
    ("darkslateblue", 0x483D8B),
    ("slate blue", "slateblue", 0x6A5ACD),
    ("medium slate", "mediumslateblue", 0x7B68EE),
    ("lightslateblue", 0x8470FF),
    ("medium blue", "mediumblue", 0xCD),
    ("royal blue", "royalblue", 0x4169E1),
    ("blue", 0xFF),
    ("dodger blue", "dodgerblue", 0x1E90FF),
    ("deep sky", "deepskyblue", 0xBFFF),
    ("sky blue", "skyblue", 0x87CEEB),
    ("light sky", "lightskyblue", 0x87CEFA),
    ("steel blue", "steelblue", 0x4682B4),
    ("light steel", "lightsteelblue", 0xB0C4DE),
    ("light blue", "lightblue", 0xADD8E6),
    ("powder blue", "powderblue", 0xB0E0E6),
    ("pale turquoise", "paleturquoise", 0xAFEEEE),
    ("dark turquoise", "darkturquoise", 0xCED1),
    ("medium turquoise", "mediumturquoise", 0x48D1CC),
    ("turquoise", 0x40E0D0),
    ("cyan", 0xFFFF),
    ("light cyan", "lightcyan", 0xE0FFFF),
    ("cadet blue", "cadetblue", 0x5F9EA0),
    ("medium aquamarine", "mediumaquamarine", 0x66CDAA),
    ("aquamarine", 0x7FFFD4),
    ("dark green", "darkgreen", 0x6400),
    ("dark olive", "darkolivegreen", 0x556B2F),
    ("dark sea", "darkseagreen", 0x8FBC8F),
    ("sea green", "seagreen", 0x2E8B57),
    ("medium sea", "mediumseagreen", 0x3CB371),
    ("light sea", "lightseagreen", 0x20B2AA),
    ("pale green", "palegreen", 0x98FB98),
    ("spring green", "springgreen", 0xFF7F),
    ("lawn green", "lawngreen", 0x7CFC00),
    ("green", 0xFF00),
    ("chartreuse", 0x7FFF00),
    ("medium spring", "mediumspringgreen", 0xFA9A),
    ("green yellow", "greenyellow", 0xADFF2F),
    ("lime green", "limegreen", 0x32CD32),
    ("yellow green", "yellowgreen", 0x9ACD32),
    ("forest green", "forestgreen", 0x228B22),
    ("olive drab", "olivedrab", 0x6B8E23),
    ("dark khaki", "darkkhaki", 0xBDB76B),
    ("khaki", 0xF0E68C),
    ("pale goldenrod", "palegoldenrod", 0xEEE8AA),
    ("light goldenrod", "lightgoldenrodyellow", 0xFAFAD2),
    ("light yellow", "lightyellow", 0xFFFFE0),
    ("yellow", 0xFFFF00),
    ("gold", 0xFFD700),
    ("lightgoldenrod", 0xEEDD82),
    ("goldenrod", 0xDAA520),
    ("dark goldenrod", "darkgoldenrod", 0xB8860B),
    ("rosy brown", "rosybrown", 0xBC8F8F),
    ("indian red", "indianred", 0xCD5C5C),
    ("saddle brown", "saddlebrown", 0x8B4513),
    ("sienna", 0xA0522D),
    ("peru", 0xCD853F),
    ("burlywood", 0xDEB887),
    ("beige", 0xF5F5DC),
    ("wheat", 0xF5DEB3),
    ("sandy brown", "sandybrown", 0xF4A460),
    ("tan", 0xD2B48C),
    ("chocolate", 0xD2691E),
    ("firebrick", 0xB22222),
    ("brown", 0xA52A2A),
    ("dark salmon", "darksalmon", 0xE9967A),
    ("salmon", 0xFA8072),
    ("light salmon", "lightsalmon", 0xFFA07A),
    ("orange", 0xFFA500),
    ("dark orange", "darkorange", 0xFF8C00),
    ("coral", 0xFF7F50),
    ("light coral", "lightcoral", 0xF08080),
    ("tomato", 0xFF6347),
    ("orange red", "orangered", 0xFF4500),
    ("red", 0xFF0000),
    ("hot pink", "hotpink", 0xFF69B4),
    ("deep pink", "deeppink", 0xFF1493),
    ("pink", 0xFFC0CB),
    ("light pink", "lightpink", 0xFFB6C1),
    ("pale violet", "palevioletred", 0xDB7093),
    ("maroon", 0xB03060),
    ("medium violet", "mediumvioletred", 0xC71585),
    ("violet red", "violetred", 0xD02090),
    ("magenta", 0xFF00FF),
    ("violet", 0xEE82EE),
    ("plum", 0xDDA0DD),
    ("orchid", 0xDA70D6),
    ("medium orchid", "mediumorchid", 0xBA55D3),
    ("dark orchid", "darkorchid", 0x9932CC),
    ("dark violet", "darkviolet", 0x9400D3),
    ("blue violet", "blueviolet", 0x8A2BE2),
    ("purple", 0xA020F0),
    ("medium purple", "mediumpurple", 0x9370DB),
    ("thistle", 0xD8BFD8),
)

# Numbered variants: name1 .. name4.
_SHADES: tuple[tuple[str, tuple[int, int, int, int]], ...] = (
    ("snow", (0xFFFAFA, 0xEEE9E9, 0xCDC9C9, 0x8B8989)),
    ("seashell", (0xFFF5EE, 0xEEE5DE, 0xCDC5BF, 0x8B8682)),
    ("antiquewhite", (0xFFEFDB, 0xEEDFCC, 0xCDC0B0, 0x8B8378)),
    ("bisque", (0xFFE4C4, 0xEED5B7, 0xCDB79E, 0x8B7D6B)),
    ("peachpuff", (0xFFDAB9, 0xEECBAD, 0xCDAF95, 0x8B7765)),
    ("navajowhite", (0xFFDEAD, 0xEECFA1, 0xCDB38B, 0x8B795E)),
    ("lemonchiffon", (0xFFFACD, 0xEEE9BF, 0xCDC9A5, 0x8B8970)),
    ("cornsilk", (0xFFF8DC, 0xEEE8CD, 0xCDC8B1, 0x8B8878)),
    ("ivory", (0xFFFFF0, 0xEEEEE0, 0xCDCDC1, 0x8B8B83)),
    ("honeydew", (0xF0FFF0, 0xE0EEE0, 0xC1CDC1, 0x838B83)),
    ("lavenderblush", (0xFFF0F5, 0xEEE0E5, 0xCDC1C5, 0x8B8386)),
    ("mistyrose", (0xFFE4E1, 0xEED5D2, 0xCDB7B5, 0x8B7D7B)),
    ("azure", (0xF0FFFF, 0xE0EEEE, 0xC1CDCD, 0x838B8B)),
    ("slateblue", (0x836FFF, 0x7A67EE, 0x6959CD, 0x473C8B)),
    ("royalblue", (0x4876FF, 0x436EEE, 0x3A5FCD, 0x27408B)),
    ("blue", (0xFF, 0xEE, 0xCD, 0x8B)),
    ("dodgerblue", (0x1E90FF, 0x1C86EE, 0x1874CD, 0x104E8B)),
    ("steelblue", (0x63B8FF, 0x5CACEE, 0x4F94CD, 0x36648B)),
    ("deepskyblue", (0xBFFF, 0xB2EE, 0x9ACD, 0x688B)),
    ("skyblue", (0x87CEFF, 0x7EC0EE, 0x6CA6CD, 0x4A708B)),
    ("lightskyblue", (0xB0E2FF, 0xA4D3EE, 0x8DB6CD, 0x607B8B)),
    ("slategray", (0xC6E2FF, 0xB9D3EE, 0x9FB6CD, 0x6C7B8B)),
    ("lightsteelblue", (0xCAE1FF, 0xBCD2EE, 0xA2B5CD, 0x6E7B8B)),
    ("lightblue", (0xBFEFFF, 0xB2DFEE, 0x9AC0CD, 0x68838B)),
    ("lightcyan", (0xE0FFFF, 0xD1EEEE, 0xB4CDCD, 0x7A8B8B)),
    ("paleturquoise", (0xBBFFFF, 0xAEEEEE, 0x96CDCD, 0x668B8B)),
    ("cadetblue", (0x98F5FF, 0x8EE5EE, 0x7AC5CD, 0x53868B)),
    ("turquoise", (0xF5FF, 0xE5EE, 0xC5CD, 0x868B)),
    ("cyan", (0xFFFF, 0xEEEE, 0xCDCD, 0x8B8B)),
    ("darkslategray", (0x97FFFF, 0x8DEEEE, 0x79CDCD, 0x528B8B)),
    ("aquamarine", (0x7FFFD4, 0x76EEC6, 0x66CDAA, 0x458B74)),
    ("darkseagreen", (0xC1FFC1, 0xB4EEB4, 0x9BCD9B, 0x698B69)),
    ("seagreen", (0x54FF9F, 0x4EEE94, 0x43CD80, 0x2E8B57)),
    ("palegreen", (0x9AFF9A, 0x90EE90, 0x7CCD7C, 0x548B54)),
    ("springgreen", (0xFF7F, 0xEE76, 0xCD66, 0x8B45)),
    ("green", (0xFF00, 0xEE00, 0xCD00, 0x8B00)),
    ("chartreuse", (0x7FFF00, 0x76EE00, 0x66CD00, 0x458B00)),
    ("olivedrab", (0xC0FF3E, 0xB3EE3A, 0x9ACD32, 0x698B22)),
    ("darkolivegreen", (0xCAFF70, 0xBCEE68, 0xA2CD5A, 0x6E8B3D)),
    ("khaki", (0xFFF68F, 0xEEE685, 0xCDC673, 0x8B864E)),
    ("lightgoldenrod", (0xFFEC8B, 0xEEDC82, 0xCDBE70, 0x8B814C)),
    ("lightyellow", (0xFFFFE0, 0xEEEED1, 0xCDCDB4, 0x8B8B7A)),
    ("yellow", (0xFFFF00, 0xEEEE00, 0xCDCD00, 0x8B8B00)),
    ("gold", (0xFFD700, 0xEEC900, 0xCDAD00, 0x8B7500)),
    ("goldenrod", (0xFFC125, 0xEEB422, 0xCD9B1D, 0x8B6914)),
    ("darkgoldenrod", (0xFFB90F, 0xEEAD0E, 0xCD950C, 0x8B6508)),
    ("rosybrown", (0xFFC1C1, 0xEEB4B4, 0xCD9B9B, 0x8B6969)),
    ("indianred", (0xFF6A6A, 0xEE6363, 0xCD5555, 0x8B3A3A)),
    ("sienna", (0xFF8247, 0xEE7942, 0xCD6839, 0x8B4726)),
    ("burlywood", (0xFFD39B, 0xEEC591, 0xCDAA7D, 0x8B7355)),
    ("wheat", (0xFFE7BA, 0xEED8AE, 0xCDBA96, 0x8B7E66)),
    ("tan", (0xFFA54F, 0xEE9A49, 0xCD853F, 0x8B5A2B)),
    ("chocolate", (0xFF7F24, 0xEE7621, 0xCD661D, 0x8B4513)),
    ("firebrick", (0xFF3030, 0xEE2C2C, 0xCD2626, 0x8B1A1A)),
    ("brown", (0xFF4040, 0xEE3B3B, 0xCD3333, 0x8B2323)),
    ("salmon", (0xFF8C69, 0xEE8262, 0xCD7054, 0x8B4C39)),
    ("lightsalmon", (0xFFA07A, 0xEE9572, 0xCD8162, 0x8B5742)),
    ("orange", (0xFFA500, 0xEE9A00, 0xCD8500, 0x8B5A00)),
    ("darkorange", (0xFF7F00, 0xEE7600, 0xCD6600, 0x8B4500)),
    ("coral", (0xFF7256, 0xEE6A50, 0xCD5B45, 0x8B3E2F)),
    ("tomato", (0xFF6347, 0xEE5C42, 0xCD4F39, 0x8B3626)),
    ("orangered", (0xFF4500, 0xEE4000, 0xCD3700, 0x8B2500)),
    ("red", (0xFF0000, 0xEE0000, 0xCD0000, 0x8B0000)),
    ("deeppink", (0xFF1493, 0xEE1289, 0xCD1076, 0x8B0A50)),
    ("hotpink", (0xFF6EB4, 0xEE6AA7, 0xCD6090, 0x8B3A62)),
    ("pink", (0xFFB5C5, 0xEEA9B8, 0xCD919E, 0x8B636C)),
    ("lightpink", (0xFFAEB9, 0xEEA2AD, 0xCD8C95, 0x8B5F65)),
    ("palevioletred", (0xFF82AB, 0xEE799F, 0xCD6889, 0x8B475D)),
    ("maroon", (0xFF34B3, 0xEE30A7, 0xCD2990, 0x8B1C62)),
    ("violetred", (0xFF3E96, 0xEE3A8C, 0xCD3278, 0x8B2252)),
    ("magenta", (0xFF00FF, 0xEE00EE, 0xCD00CD, 0x8B008B)),
    ("orchid", (0xFF83FA, 0xEE7AE9, 0xCD69C9, 0x8B4789)),
    ("plum", (0xFFBBFF, 0xEEAEEE, 0xCD96CD, 0x8B668B)),
    ("mediumorchid", (0xE066FF, 0xD15FEE, 0xB452CD, 0x7A378B)),
    ("darkorchid", (0xBF3EFF, 0xB23AEE, 0x9A32CD, 0x68228B)),
    ("purple", (0x9B30FF, 0x912CEE, 0x7D26CD, 0x551A8B)),
    ("mediumpurple", (0xAB82FF, 0x9F79EE, 0x8968CD, 0x5D478B)),
    ("thistle", (0xFFE1FF, 0xEED2EE, 0xCDB5CD, 0x8B7B8B)),
)

# Values of gray0 .. gray100 (and the grey spellings).
_GRAY_LEVELS: tuple[int, ...] = (
    0x000000, 0x030303, 0x050505, 0x080808, 0x0A0A0A,
    0x0D0D0D, 0x0F0F0F, 0x121212, 0x141414, 0x171717,
    0x1A1A1A, 0x1C1C1C, 0x1F1F1F, 0x212121, 0x242424,
    0x262626, 0x292929, 0x2B2B2B, 0x2E2E2E, 0x303030,
    0x333333, 0x363636, 0x383838, 0x3B3B3B, 0x3D3D3D,
    0x404040, 0x424242, 0x454545, 0x474747, 0x4A4A4A,
    0x4D4D4D, 0x4F4F4F, 0x525252, 0x545454, 0x575757,
    0x595959, 0x5C5C5C, 0x5E5E5E, 0x616161, 0x636363,
    0x666666, 0x696969, 0x6B6B6B, 0x6E6E6E, 0x707070,
    0x737373, 0x757575, 0x787878, 0x7A7A7A, 0x7D7D7D,
    0x7F7F7F, 0x828282, 0x858585, 0x878787, 0x8A8A8A,
    0x8C8C8C, 0x8F8F8F, 0x919191, 0x949494, 0x969696,
    0x999999, 0x9C9C9C, 0x9E9E9E, 0xA1A1A1, 0xA3A3A3,
    0xA6A6A6, 0xA8A8A8, 0xABABAB, 0xADADAD, 0xB0B0B0,
    0xB3B3B3, 0xB5B5B5, 0xB8B8B8, 0xBABABA, 0xBDBDBD,
    0xBFBFBF, 0xC2C2C2, 0xC4C4C4, 0xC7C7C7, 0xC9C9C9,
    0xCCCCCC, 0xCFCFCF, 0xD1D1D1, 0xD4D4D4, 0xD6D6D6,
    0xD9D9D9, 0xDBDBDB, 0xDEDEDE, 0xE0E0E0, 0xE3E3E3,
    0xE5E5E5, 0xE8E8E8, 0xEBEBEB, 0xEDEDED, 0xF0F0F0,
    0xF2F2F2, 0xF5F5F5, 0xF7F7F7, 0xFAFAFA, 0xFCFCFC,
    0xFFFFFF,
)

_TRAILING: tuple[tuple[str | int, ...], ...] = (
    ("dark grey", "darkgrey", "dark gray", "darkgray", 0xA9A9A9),
    ("dark blue", "darkblue", 0x8B),
    ("dark cyan", "darkcyan", 0x8B8B),
    ("dark magenta", "darkmagenta", 0x8B008B),
    ("dark red", "darkred", 0x8B0000),
    ("light green", "lightgreen", 0x90EE90),
    ("none", -1),
)


def _entries() -> Iterator[tuple[str, int]]:
    """Yield every (name, value) pair in table order."""
    for *names, value in _NAMED:
        for name in names:
            yield str(name), int(value)
    for base, values in _SHADES:
        for number, value in enumerate(values, start=1):
            yield f"{base}{number}", value
    for level, value in enumerate(_GRAY_LEVELS):
        yield f"gray{level}", value
        yield f"grey{level}", value
    for *names, value in _TRAILING:
        for name in names:
            yield str(name), int(value)


def _build_table() -> dict[str, int]:
    table: dict[str, int] = {}
    for name, value in _entries():
        # The first definition of a name wins, as in a linear search.
        table.setdefault(name, value)
    return table


_TABLE = _build_table()
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def lookup_color(name: str) -> int:
    """Return the 0xRRGGBB value of a colour name, ignoring ASCII case.

    The name ``none`` gives -1 (transparent); an unknown name gives 0.
    """
    return _TABLE.get(name.translate(_ASCII_LOWER), 0)