"""Transfer tax (ITP) rate resolution by Spanish province.

The table is immutable reference data keyed by the ISO 3166-2:ES province
code. Name matching scans the table in declaration order and the first match
wins, so the order below is part of the resolution contract.
"""

from __future__ import annotations

import re
import unicodedata
from types import MappingProxyType
from typing import NamedTuple

from profitability.core.logging import get_logger

log = get_logger(__name__)

# Most common rate; used when the region cannot be resolved
DEFAULT_TAX_RATE = 0.08


class TaxRateEntry(NamedTuple):
    full_name: str
    rate: float
    region_group: str


TAX_RATES_BY_REGION: MappingProxyType[str, TaxRateEntry] = MappingProxyType({
    # Andalucía
    "al": TaxRateEntry("Almería", 0.08, "Andalucía"),
    "ca": TaxRateEntry("Cádiz", 0.08, "Andalucía"),
    "co": TaxRateEntry("Córdoba", 0.08, "Andalucía"),
    "gr": TaxRateEntry("Granada", 0.08, "Andalucía"),
    "h": TaxRateEntry("Huelva", 0.08, "Andalucía"),
    "j": TaxRateEntry("Jaén", 0.08, "Andalucía"),
    "ma": TaxRateEntry("Málaga", 0.08, "Andalucía"),
    "se": TaxRateEntry("Sevilla", 0.08, "Andalucía"),
    # Aragón
    "hu": TaxRateEntry("Huesca", 0.08, "Aragón"),
    "te": TaxRateEntry("Teruel", 0.08, "Aragón"),
    "z": TaxRateEntry("Zaragoza", 0.08, "Aragón"),
    # Asturias
    "o": TaxRateEntry("Asturias", 0.08, "Asturias"),
    # Baleares
    "pm": TaxRateEntry("Baleares", 0.08, "Baleares"),
    # Canarias
    "gc": TaxRateEntry("Las Palmas", 0.065, "Canarias"),
    "tf": TaxRateEntry("Santa Cruz de Tenerife", 0.065, "Canarias"),
    # Cantabria
    "s": TaxRateEntry("Cantabria", 0.08, "Cantabria"),
    # Castilla y León
    "av": TaxRateEntry("Ávila", 0.08, "Castilla y León"),
    "bu": TaxRateEntry("Burgos", 0.08, "Castilla y León"),
    "le": TaxRateEntry("León", 0.08, "Castilla y León"),
    "p": TaxRateEntry("Palencia", 0.08, "Castilla y León"),
    "sa": TaxRateEntry("Salamanca", 0.08, "Castilla y León"),
    "sg": TaxRateEntry("Segovia", 0.08, "Castilla y León"),
    "so": TaxRateEntry("Soria", 0.08, "Castilla y León"),
    "va": TaxRateEntry("Valladolid", 0.08, "Castilla y León"),
    "za": TaxRateEntry("Zamora", 0.08, "Castilla y León"),
    # Castilla-La Mancha
    "ab": TaxRateEntry("Albacete", 0.08, "Castilla-La Mancha"),
    "cr": TaxRateEntry("Ciudad Real", 0.08, "Castilla-La Mancha"),
    "cu": TaxRateEntry("Cuenca", 0.08, "Castilla-La Mancha"),
    "gu": TaxRateEntry("Guadalajara", 0.08, "Castilla-La Mancha"),
    "to": TaxRateEntry("Toledo", 0.08, "Castilla-La Mancha"),
    # Cataluña
    "b": TaxRateEntry("Barcelona", 0.10, "Cataluña"),
    "gi": TaxRateEntry("Girona", 0.10, "Cataluña"),
    "l": TaxRateEntry("Lleida", 0.10, "Cataluña"),
    "t": TaxRateEntry("Tarragona", 0.10, "Cataluña"),
    # Comunidad Valenciana
    "a": TaxRateEntry("Alicante", 0.10, "Comunidad Valenciana"),
    "cs": TaxRateEntry("Castellón", 0.10, "Comunidad Valenciana"),
    "v": TaxRateEntry("Valencia", 0.10, "Comunidad Valenciana"),
    # Extremadura
    "ba": TaxRateEntry("Badajoz", 0.08, "Extremadura"),
    "cc": TaxRateEntry("Cáceres", 0.08, "Extremadura"),
    # Galicia
    "c": TaxRateEntry("A Coruña", 0.08, "Galicia"),
    "lu": TaxRateEntry("Lugo", 0.08, "Galicia"),
    "or": TaxRateEntry("Ourense", 0.08, "Galicia"),
    "po": TaxRateEntry("Pontevedra", 0.08, "Galicia"),
    # Madrid
    "m": TaxRateEntry("Madrid", 0.06, "Madrid"),
    # Murcia
    "mu": TaxRateEntry("Murcia", 0.08, "Murcia"),
    # Navarra
    "na": TaxRateEntry("Navarra", 0.06, "Navarra"),
    # País Vasco
    "vi": TaxRateEntry("Álava", 0.04, "País Vasco"),
    "ss": TaxRateEntry("Guipúzcoa", 0.04, "País Vasco"),
    "bi": TaxRateEntry("Vizcaya", 0.04, "País Vasco"),
    # La Rioja
    "lo": TaxRateEntry("La Rioja", 0.08, "La Rioja"),
    # Ceuta y Melilla
    "ce": TaxRateEntry("Ceuta", 0.04, "Ceuta"),
    "ml": TaxRateEntry("Melilla", 0.04, "Melilla"),
})

# Address search vocabulary: province code -> names and common aliases
REGION_ALIASES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "al": ("almería", "almeria"),
    "ca": ("cádiz", "cadiz"),
    "co": ("córdoba", "cordoba"),
    "gr": ("granada",),
    "h": ("huelva",),
    "j": ("jaén", "jaen"),
    "ma": ("málaga", "malaga"),
    "se": ("sevilla", "seville"),
    "hu": ("huesca",),
    "te": ("teruel",),
    "z": ("zaragoza",),
    "o": ("asturias", "oviedo"),
    "pm": ("baleares", "mallorca", "palma"),
    "gc": ("las palmas", "gran canaria"),
    "tf": ("santa cruz de tenerife", "tenerife"),
    "s": ("cantabria", "santander"),
    "av": ("ávila", "avila"),
    "bu": ("burgos",),
    "le": ("león", "leon"),
    "p": ("palencia",),
    "sa": ("salamanca",),
    "sg": ("segovia",),
    "so": ("soria",),
    "va": ("valladolid",),
    "za": ("zamora",),
    "ab": ("albacete",),
    "cr": ("ciudad real",),
    "cu": ("cuenca",),
    "gu": ("guadalajara",),
    "to": ("toledo",),
    "b": ("barcelona",),
    "gi": ("girona", "gerona"),
    "l": ("lleida", "lerida"),
    "t": ("tarragona",),
    "a": ("alicante",),
    "cs": ("castellón", "castellon", "castelló"),
    "v": ("valencia",),
    "ba": ("badajoz",),
    "cc": ("cáceres", "caceres"),
    "c": ("a coruña", "coruña", "coruna", "la coruña"),
    "lu": ("lugo",),
    "or": ("ourense", "orense"),
    "po": ("pontevedra",),
    "m": ("madrid",),
    "mu": ("murcia",),
    "na": ("navarra", "pamplona"),
    "vi": ("álava", "alava", "vitoria"),
    "ss": ("guipúzcoa", "guipuzcoa", "san sebastián", "san sebastian", "donostia"),
    "bi": ("vizcaya", "bilbao"),
    "lo": ("la rioja", "rioja", "logroño", "logrono"),
    "ce": ("ceuta",),
    "ml": ("melilla",),
})

# First two digits of a Spanish postal code
POSTAL_CODE_PREFIXES: MappingProxyType[str, str] = MappingProxyType({
    "28": "m", "08": "b", "48": "bi", "20": "ss", "01": "vi", "46": "v",
    "03": "a", "12": "cs", "15": "c", "36": "po", "27": "lu", "32": "or",
    "41": "se", "29": "ma", "18": "gr", "14": "co", "23": "j", "04": "al",
    "11": "ca", "21": "h", "50": "z", "33": "o", "35": "gc", "38": "tf",
    "39": "s", "24": "le", "34": "p", "37": "sa", "40": "sg", "42": "so",
    "47": "va", "49": "za", "02": "ab", "13": "cr", "16": "cu", "19": "gu",
    "45": "to", "06": "ba", "10": "cc", "31": "na", "26": "lo", "30": "mu",
    "07": "pm",
})

_POSTAL_CODE = re.compile(r"\b(\d{2})\d{3}\b")


def _normalize(region: str | None) -> str:
    """Trim and lowercase. Accents are kept."""
    return (region or "").strip().lower()


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def resolve_tax_rate_entry(region: str | None) -> TaxRateEntry | None:
    """Find the table entry for a province code or name.

    Exact code match first, then the first entry (declaration order) whose
    name contains the input or is contained in it.

    Args:
        region: Province code ("m"), name ("Madrid") or free text

    Returns:
        Matching entry, or None when nothing matches
    """
    key = _normalize(region)
    if not key:
        return None

    entry = TAX_RATES_BY_REGION.get(key)
    if entry is not None:
        return entry

    for entry in TAX_RATES_BY_REGION.values():
        name = entry.full_name.lower()
        if key in name or name in key:
            return entry

    return None


def resolve_tax_rate(region: str | None, default: float = DEFAULT_TAX_RATE) -> float:
    """Transfer tax rate (fraction) for a region, falling back to ``default``.

    Never raises: unknown or missing regions degrade to the default rate.
    """
    entry = resolve_tax_rate_entry(region)
    if entry is None:
        if _normalize(region):
            log.info("tax_rate_region_unresolved", region=region, rate=default)
        return default
    return entry.rate


def extract_region_from_address(address: str | None) -> str | None:
    """Guess the province code of a postal address.

    Province names and aliases are matched accent-insensitively; the postal
    code prefix is the fallback.

    Returns:
        Province code usable with ``resolve_tax_rate``, or None
    """
    if not address:
        return None

    text = _strip_accents(address.lower())

    for code, names in REGION_ALIASES.items():
        for name in names:
            if _strip_accents(name) in text:
                return code

    match = _POSTAL_CODE.search(text)
    if match:
        return POSTAL_CODE_PREFIXES.get(match.group(1))

    return None
