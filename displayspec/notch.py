"""
Notch (front camera cutout) detection from a phone's name.

Brands are checked in a fixed order and the first brand whose keywords
appear in the name decides the result; later brands are never consulted.
Inside a brand the model rules are ordered as well and the first hit wins.
Names that match no brand get a punch-hole, the most common cutout today.
"""

import re

from displayspec.models import NotchType

DYNAMIC_ISLAND = NotchType.DYNAMIC_ISLAND
WIDE = NotchType.WIDE
TEARDROP = NotchType.TEARDROP
PUNCH_HOLE = NotchType.PUNCH_HOLE
PILL = NotchType.PILL
NONE = NotchType.NONE

DEFAULT_NOTCH = PUNCH_HOLE


def _model_number(pattern: str, name: str):
    match = re.search(pattern, name)
    return int(match.group(1)) if match else None


def _apple(name: str) -> NotchType:
    # iPhone 14 Pro / Pro Max and every iPhone 15 and later
    if any(m in name for m in ('iphone 14 pro', 'iphone 15', 'iphone 16', 'iphone 17')):
        return DYNAMIC_ISLAND
    # iPhone X through iPhone 14
    if any(m in name for m in ('iphone x', 'iphone 11', 'iphone 12', 'iphone 13', 'iphone 14')):
        return WIDE
    # iPhone 8 and older
    return NONE


def _samsung(name: str) -> NotchType:
    if 'flip' in name:
        return PUNCH_HOLE
    if 'fold' in name:
        return PUNCH_HOLE

    if 'galaxy s' in name:
        number = _model_number(r'galaxy s(\d+)', name)
        if number is not None and number >= 10:
            return PUNCH_HOLE
        if re.search(r's2[0-4]|s10', name):
            return PUNCH_HOLE
        # S9 and older
        return NONE

    if 'galaxy a' in name:
        number = _model_number(r'galaxy a(\d+)', name)
        if number is not None:
            if number >= 51:
                return PUNCH_HOLE
            if 30 <= number <= 50:
                return TEARDROP
            # Unreachable, >= 70 is already covered by >= 51
            if number >= 70:
                return PUNCH_HOLE
            if 10 <= number < 30:
                return TEARDROP
        # A30s, A50s
        if re.search(r'a[0-9]+s', name):
            return TEARDROP
        if re.search(r'a5[1-5]|a7[1-5]|a3[3-5]', name):
            return PUNCH_HOLE
        return TEARDROP

    if 'galaxy m' in name:
        number = _model_number(r'galaxy m(\d+)', name)
        if number is not None:
            if number >= 51:
                return PUNCH_HOLE
            if number >= 30:
                return TEARDROP
        return TEARDROP

    if 'galaxy f' in name:
        return TEARDROP

    return PUNCH_HOLE


def _pixel(name: str) -> NotchType:
    # Pixel 3 XL is the only Pixel with a wide notch
    if 'pixel 3' in name and 'xl' in name:
        return WIDE
    if 'pixel 3' in name and 'xl' not in name and '3a' not in name:
        return NONE
    if '3a' in name or '4a' in name:
        return PUNCH_HOLE
    # Pixel 4 keeps its radar in the top bezel. The 4a check repeats the
    # rule above and can never fail here.
    if 'pixel 4' in name and '4a' not in name:
        return NONE
    if re.search(r'pixel [5-9]', name):
        return PUNCH_HOLE
    return PUNCH_HOLE


def _oneplus(name: str) -> NotchType:
    if '6t' in name or ('oneplus 7' in name and '7t' not in name and 'pro' not in name):
        return TEARDROP
    # 7 Pro / 7T Pro use a pop-up camera
    if ('7' in name or '7t' in name) and 'pro' in name:
        return NONE
    if re.search(r'oneplus [8-9]|oneplus 1[0-2]|nord', name):
        return PUNCH_HOLE
    return PUNCH_HOLE


def _xiaomi(name: str) -> NotchType:
    if 'mi mix' in name:
        return NONE
    if 'mi 9' in name:
        return TEARDROP
    if re.search(r'mi 1[0-3]', name):
        return PUNCH_HOLE

    if 'redmi note' in name:
        number = _model_number(r'note (\d+)', name)
        if number is not None:
            if number >= 10:
                return PUNCH_HOLE
            if number >= 7:
                return TEARDROP
        return TEARDROP

    if 'redmi' in name:
        return TEARDROP

    if 'poco' in name:
        if 'f1' in name:
            return WIDE
        return PUNCH_HOLE

    if re.search(r'xiaomi 1[1-4]', name):
        return PUNCH_HOLE

    return TEARDROP


def _oppo(name: str) -> NotchType:
    if 'find x' in name:
        return PUNCH_HOLE
    if 'reno' in name:
        # Reno 10x zoom has a pop-up camera
        if '10x' in name:
            return NONE
        return PUNCH_HOLE
    if 'oppo a' in name:
        return TEARDROP
    if 'oppo f' in name:
        return TEARDROP
    return TEARDROP


def _vivo(name: str) -> NotchType:
    if 'vivo v' in name:
        return TEARDROP
    if 'vivo y' in name:
        return TEARDROP
    if 'vivo x' in name:
        return PUNCH_HOLE
    # NEX uses a pop-up camera
    if 'nex' in name:
        return NONE
    if 'iqoo' in name:
        return PUNCH_HOLE
    return TEARDROP


def _realme(name: str) -> NotchType:
    if 'gt' in name:
        return PUNCH_HOLE
    number = _model_number(r'realme (\d+)', name)
    if number is not None:
        if number >= 8:
            return PUNCH_HOLE
        return TEARDROP
    if 'realme c' in name:
        return TEARDROP
    if 'narzo' in name:
        return PUNCH_HOLE
    return TEARDROP


def _huawei(name: str) -> NotchType:
    if 'p30' in name:
        return TEARDROP
    if any(m in name for m in ('p40', 'p50', 'p60')):
        return PILL
    if 'mate 20' in name:
        return WIDE
    if any(m in name for m in ('mate 30', 'mate 40', 'mate 50')):
        return WIDE
    if 'nova' in name:
        return TEARDROP
    if 'honor' in name:
        if 'magic' in name:
            return PUNCH_HOLE
        return TEARDROP
    return TEARDROP


def _motorola(name: str) -> NotchType:
    if 'edge' in name:
        return PUNCH_HOLE
    if 'moto g' in name:
        # Moto G 5G and two-digit G models
        if '5g' in name or re.search(r'g[0-9]{2}', name):
            return PUNCH_HOLE
        return TEARDROP
    if 'razr' in name:
        return PUNCH_HOLE
    return TEARDROP


def _asus(name: str) -> NotchType:
    if 'rog' in name:
        return NONE
    # Zenfone 6 / 7 flip camera
    if 'zenfone 6' in name or 'zenfone 7' in name:
        return NONE
    if re.search(r'zenfone [8-9]|zenfone 10', name):
        return PUNCH_HOLE
    return PUNCH_HOLE


def _lg(name: str) -> NotchType:
    if 'v60' in name or 'velvet' in name:
        return TEARDROP
    return NONE


def _always(notch: NotchType):
    return lambda name: notch


# Order matters: a name is handled by the first brand whose keywords it contains.
BRAND_RULES = [
    (('iphone',), _apple),
    (('samsung', 'galaxy'), _samsung),
    (('pixel',), _pixel),
    (('oneplus',), _oneplus),
    (('xiaomi', 'redmi', 'poco'), _xiaomi),
    (('oppo',), _oppo),
    (('vivo',), _vivo),
    (('realme',), _realme),
    (('huawei', 'honor'), _huawei),
    (('motorola', 'moto'), _motorola),
    (('nothing',), _always(PUNCH_HOLE)),
    (('sony', 'xperia'), _always(NONE)),
    (('asus', 'rog', 'zenfone'), _asus),
    (('nokia',), _always(TEARDROP)),
    (('tecno', 'infinix', 'itel'), _always(TEARDROP)),
    (('lg ',), _lg),
]


def classify(phone_name: str) -> NotchType:
    """Detect the notch type of a phone from its name. Always returns a NotchType."""
    name = (phone_name or '').lower()

    for keywords, rule in BRAND_RULES:
        if any(keyword in name for keyword in keywords):
            return rule(name)

    return DEFAULT_NOTCH
