"""Static catalog of unit categories and their units.

Every linear unit stores a multiplier relative to the base unit of its
category (``value_in_base = value * base_multiplier``).  Temperature and fuel
economy units keep the field for schema compatibility only; the conversion
engine uses dedicated formulas for those categories.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import UnitNotFoundError


class CategoryKind(str, Enum):
    LINEAR = "linear"
    TEMPERATURE = "temperature"
    FUEL_ECONOMY = "fuel_economy"


@dataclass(frozen=True)
class Unit:
    id: str
    name: str
    symbol: str
    base_multiplier: float


@dataclass(frozen=True)
class UnitCategory:
    id: str
    name: str
    icon: str
    base_unit_id: str
    units: Tuple[Unit, ...]
    kind: CategoryKind = CategoryKind.LINEAR

    def get_unit(self, unit_id: str) -> Optional[Unit]:
        for unit in self.units:
            if unit.id == unit_id:
                return unit
        return None

    @property
    def base_unit(self) -> Unit:
        unit = self.get_unit(self.base_unit_id)
        if unit is None:
            raise UnitNotFoundError(self.base_unit_id, category_id=self.id)
        return unit

    @property
    def unit_ids(self) -> List[str]:
        return [unit.id for unit in self.units]


U = Unit

UNIT_CATEGORIES: Tuple[UnitCategory, ...] = (
    UnitCategory(
        id="length",
        name="Length",
        icon="📏",
        base_unit_id="m",
        units=(
            # Metric
            U("pm", "Picometer", "pm", 0.000000000001),
            U("nm", "Nanometer", "nm", 0.000000001),
            U("μm", "Micrometer", "μm", 0.000001),
            U("mm", "Millimeter", "mm", 0.001),
            U("cm", "Centimeter", "cm", 0.01),
            U("dm", "Decimeter", "dm", 0.1),
            U("m", "Meter", "m", 1),
            U("dam", "Dekameter", "dam", 10),
            U("hm", "Hectometer", "hm", 100),
            U("km", "Kilometer", "km", 1000),
            # Imperial/US
            U("mil", "Mil (thou)", "mil", 0.0000254),
            U("in", "Inch", "in", 0.0254),
            U("ft", "Foot", "ft", 0.3048),
            U("yd", "Yard", "yd", 0.9144),
            U("chain", "Chain", "ch", 20.1168),
            U("furlong", "Furlong", "fur", 201.168),
            U("mi", "Mile", "mi", 1609.344),
            U("league", "League", "lea", 4828.032),
            # Nautical
            U("nmi", "Nautical Mile", "nmi", 1852),
            U("cable", "Cable Length", "cable", 185.2),
            U("fathom", "Fathom", "ftm", 1.8288),
            # Astronomical
            U("au", "Astronomical Unit", "AU", 1.496e11),
            U("ly", "Light Year", "ly", 9.461e15),
            U("pc", "Parsec", "pc", 3.086e16),
            # Typography
            U("pt", "Point (typography)", "pt", 0.000352778),
            U("pica", "Pica", "P̸", 0.004233333),
            U("em", "Em (typography)", "em", 0.004233333),
        ),
    ),
    UnitCategory(
        id="weight",
        name="Weight & Mass",
        icon="⚖️",
        base_unit_id="kg",
        units=(
            U("μg", "Microgram", "μg", 1e-9),
            U("mg", "Milligram", "mg", 0.000001),
            U("cg", "Centigram", "cg", 0.00001),
            U("dg", "Decigram", "dg", 0.0001),
            U("g", "Gram", "g", 0.001),
            U("dag", "Dekagram", "dag", 0.01),
            U("hg", "Hectogram", "hg", 0.1),
            U("kg", "Kilogram", "kg", 1),
            U("t", "Metric Ton", "t", 1000),
            U("gr", "Grain", "gr", 0.00006479891),
            U("dr", "Dram", "dr", 0.0017718451953125),
            U("oz", "Ounce", "oz", 0.0283495),
            U("lb", "Pound", "lb", 0.453592),
            U("st", "Stone", "st", 6.35029),
            U("qtr", "Quarter", "qtr", 12.70059),
            U("cwt", "Hundredweight (US)", "cwt", 45.359237),
            U("ton_us", "US Ton (Short)", "ton", 907.185),
            U("ton_uk", "UK Ton (Long)", "LT", 1016.047),
            # Troy
            U("dwt", "Pennyweight", "dwt", 0.00155517384),
            U("oz_t", "Troy Ounce", "oz t", 0.0311034768),
            U("lb_t", "Troy Pound", "lb t", 0.3732417216),
            # Gems
            U("ct", "Carat", "ct", 0.0002),
            U("point", "Point (carat)", "pt", 0.00002),
            # Asian
            U("tael", "Tael", "tael", 0.0378),
            U("catty", "Catty", "catty", 0.6048),
            U("u", "Atomic Mass Unit", "u", 1.66054e-27),
        ),
    ),
    UnitCategory(
        id="volume",
        name="Volume",
        icon="🥤",
        base_unit_id="l",
        units=(
            U("μl", "Microliter", "μL", 0.000001),
            U("ml", "Milliliter", "mL", 0.001),
            U("cl", "Centiliter", "cL", 0.01),
            U("dl", "Deciliter", "dL", 0.1),
            U("l", "Liter", "L", 1),
            U("dal", "Dekaliter", "daL", 10),
            U("hl", "Hectoliter", "hL", 100),
            U("kl", "Kiloliter", "kL", 1000),
            # Cubic
            U("mm3", "Cubic Millimeter", "mm³", 0.000001),
            U("cm3", "Cubic Centimeter", "cm³", 0.001),
            U("dm3", "Cubic Decimeter", "dm³", 1),
            U("m3", "Cubic Meter", "m³", 1000),
            U("km3", "Cubic Kilometer", "km³", 1e12),
            U("in3", "Cubic Inch", "in³", 0.0163871),
            U("ft3", "Cubic Foot", "ft³", 28.3168),
            U("yd3", "Cubic Yard", "yd³", 764.555),
            # US liquid
            U("minim", "Minim (US)", "min", 0.0000616115),
            U("fl_dr", "Fluid Dram (US)", "fl dr", 0.00369669),
            U("tsp_us", "Teaspoon (US)", "tsp", 0.00492892),
            U("tbsp_us", "Tablespoon (US)", "tbsp", 0.0147868),
            U("floz_us", "Fluid Ounce (US)", "fl oz", 0.0295735),
            U("jigger", "Jigger", "jigger", 0.0443603),
            U("gill_us", "Gill (US)", "gi", 0.118294),
            U("cup_us", "Cup (US)", "cup", 0.236588),
            U("pt_us", "Pint (US)", "pt", 0.473176),
            U("qt_us", "Quart (US)", "qt", 0.946353),
            U("gal_us", "Gallon (US)", "gal", 3.78541),
            # Imperial liquid
            U("tsp_uk", "Teaspoon (UK)", "tsp", 0.00591939),
            U("tbsp_uk", "Tablespoon (UK)", "tbsp", 0.0177582),
            U("floz_uk", "Fluid Ounce (UK)", "fl oz", 0.0284131),
            U("gill_uk", "Gill (UK)", "gi", 0.142065),
            U("cup_uk", "Cup (UK)", "cup", 0.284131),
            U("pt_uk", "Pint (UK)", "pt", 0.568261),
            U("qt_uk", "Quart (UK)", "qt", 1.13652),
            U("gal_uk", "Gallon (UK)", "gal", 4.54609),
            # Wine and spirits
            U("shot", "Shot", "shot", 0.0443603),
            U("wine_bottle", "Wine Bottle", "bottle", 0.75),
            U("magnum", "Magnum", "magnum", 1.5),
            # Oil industry
            U("bbl_oil", "Oil Barrel", "bbl", 158.987),
            U("bbl_us", "US Barrel", "bbl", 119.24),
        ),
    ),
    UnitCategory(
        id="temperature",
        name="Temperature",
        icon="🌡️",
        base_unit_id="c",
        kind=CategoryKind.TEMPERATURE,
        units=(
            U("c", "Celsius", "°C", 1),
            U("f", "Fahrenheit", "°F", 1),
            U("k", "Kelvin", "K", 1),
            U("r", "Rankine", "°R", 1),
            U("re", "Réaumur", "°Ré", 1),
            U("n", "Newton", "°N", 1),
            U("de", "Delisle", "°De", 1),
            U("ro", "Rømer", "°Rø", 1),
        ),
    ),
    UnitCategory(
        id="area",
        name="Area",
        icon="🔲",
        base_unit_id="m2",
        units=(
            U("mm2", "Square Millimeter", "mm²", 0.000001),
            U("cm2", "Square Centimeter", "cm²", 0.0001),
            U("dm2", "Square Decimeter", "dm²", 0.01),
            U("m2", "Square Meter", "m²", 1),
            U("dam2", "Square Dekameter", "dam²", 100),
            U("hm2", "Square Hectometer", "hm²", 10000),
            U("km2", "Square Kilometer", "km²", 1000000),
            U("ha", "Hectare", "ha", 10000),
            U("a", "Are", "a", 100),
            U("ca", "Centiare", "ca", 1),
            U("mil2", "Square Mil", "mil²", 6.4516e-10),
            U("in2", "Square Inch", "in²", 0.00064516),
            U("ft2", "Square Foot", "ft²", 0.092903),
            U("yd2", "Square Yard", "yd²", 0.836127),
            U("rod2", "Square Rod", "rod²", 25.2929),
            U("rood", "Rood", "rood", 1011.71),
            U("ac", "Acre", "ac", 4046.86),
            U("mi2", "Square Mile", "mi²", 2590000),
            U("twp", "Township", "twp", 93239571.97),
            U("barn", "Barn", "b", 1e-28),
            U("dunam", "Dunam", "dunam", 1000),
            U("ping", "Ping", "ping", 3.3058),
            U("tsubo", "Tsubo", "tsubo", 3.3058),
            # Paper sizes
            U("a0", "A0 Paper", "A0", 0.999949),
            U("a1", "A1 Paper", "A1", 0.499975),
            U("a2", "A2 Paper", "A2", 0.249987),
            U("a3", "A3 Paper", "A3", 0.124994),
            U("a4", "A4 Paper", "A4", 0.0624997),
            U("letter", "Letter Paper", "letter", 0.0603226),
            U("legal", "Legal Paper", "legal", 0.0774192),
        ),
    ),
    UnitCategory(
        id="speed",
        name="Speed",
        icon="🚗",
        base_unit_id="mps",
        units=(
            U("mps", "Meters per Second", "m/s", 1),
            U("kph", "Kilometers per Hour", "km/h", 0.277778),
            U("mpm", "Meters per Minute", "m/min", 0.0166667),
            U("mph", "Miles per Hour", "mph", 0.44704),
            U("fps", "Feet per Second", "ft/s", 0.3048),
            U("fpm", "Feet per Minute", "ft/min", 0.00508),
            U("ips", "Inches per Second", "in/s", 0.0254),
            U("knot", "Knot", "kn", 0.514444),
            U("mach", "Mach Number", "M", 343),  # sea level
            U("c", "Speed of Light", "c", 299792458),
            # Pace units carry a -1 marker instead of a real factor
            U("min_km", "Minutes per Kilometer", "min/km", -1),
            U("min_mi", "Minutes per Mile", "min/mi", -1),
            U("mps_swim", "Meters per Second (Swimming)", "m/s", 1),
            U("cmh", "Centimeters per Hour", "cm/h", 0.00000278),
            U("furlong_fortnight", "Furlongs per Fortnight", "fur/fn", 0.000166309),
        ),
    ),
    UnitCategory(
        id="energy",
        name="Energy",
        icon="⚡",
        base_unit_id="j",
        units=(
            U("j", "Joule", "J", 1),
            U("kj", "Kilojoule", "kJ", 1000),
            U("mj", "Megajoule", "MJ", 1000000),
            U("gj", "Gigajoule", "GJ", 1000000000),
            U("wh", "Watt-hour", "Wh", 3600),
            U("kwh", "Kilowatt-hour", "kWh", 3600000),
            U("mwh", "Megawatt-hour", "MWh", 3.6e9),
            U("gwh", "Gigawatt-hour", "GWh", 3.6e12),
            U("cal", "Calorie", "cal", 4.184),
            U("kcal", "Kilocalorie", "kcal", 4184),
            U("cal_it", "IT Calorie", "cal_IT", 4.1868),
            U("btu", "British Thermal Unit", "BTU", 1055.06),
            U("btu_it", "IT British Thermal Unit", "BTU_IT", 1055.06),
            U("therm", "Therm", "thm", 105506000),
            U("quad", "Quad", "quad", 1.055e18),
            U("erg", "Erg", "erg", 1e-7),
            U("ftlb", "Foot-pound", "ft·lb", 1.35582),
            U("inlb", "Inch-pound", "in·lb", 0.112985),
            U("ev", "Electron Volt", "eV", 1.602176634e-19),
            U("kev", "Kiloelectron Volt", "keV", 1.602176634e-16),
            U("mev", "Megaelectron Volt", "MeV", 1.602176634e-13),
            U("gev", "Gigaelectron Volt", "GeV", 1.602176634e-10),
            U("tnt_g", "Gram of TNT", "g TNT", 4184),
            U("tnt_kg", "Kilogram of TNT", "kg TNT", 4.184e6),
            U("tnt_ton", "Ton of TNT", "ton TNT", 4.184e9),
            U("gasoline_l", "Liter of Gasoline", "L gas", 3.47e7),
            U("gasoline_gal", "Gallon of Gasoline", "gal gas", 1.31e8),
            U("diesel_l", "Liter of Diesel", "L diesel", 3.83e7),
        ),
    ),
    UnitCategory(
        id="power",
        name="Power",
        icon="🔌",
        base_unit_id="w",
        units=(
            U("μw", "Microwatt", "μW", 0.000001),
            U("mw_small", "Milliwatt", "mW", 0.001),
            U("w", "Watt", "W", 1),
            U("kw", "Kilowatt", "kW", 1000),
            U("mw", "Megawatt", "MW", 1000000),
            U("gw", "Gigawatt", "GW", 1000000000),
            U("tw", "Terawatt", "TW", 1e12),
            U("hp", "Horsepower (Mechanical)", "hp", 745.7),
            U("hp_metric", "Metric Horsepower", "PS", 735.5),
            U("hp_electric", "Electric Horsepower", "hp(E)", 746),
            U("hp_boiler", "Boiler Horsepower", "hp(S)", 9809.5),
            U("btu_hr", "BTU per Hour", "BTU/h", 0.293071),
            U("btu_min", "BTU per Minute", "BTU/min", 17.5843),
            U("btu_sec", "BTU per Second", "BTU/s", 1055.06),
            U("cal_sec", "Calorie per Second", "cal/s", 4.184),
            U("kcal_hr", "Kilocalorie per Hour", "kcal/h", 1.16222),
            U("ftlb_sec", "Foot-pound per Second", "ft·lb/s", 1.35582),
            U("ftlb_min", "Foot-pound per Minute", "ft·lb/min", 0.0225970),
            U("ton_refrig", "Ton of Refrigeration", "TR", 3516.85),
            U("lumen", "Lumen", "lm", 0.00146),  # approximate
            U("poncelet", "Poncelet", "p", 980.665),
        ),
    ),
    UnitCategory(
        id="data",
        name="Digital Storage",
        icon="💾",
        base_unit_id="b",
        units=(
            U("bit", "Bit", "bit", 0.125),
            U("kbit", "Kilobit", "kbit", 128),
            U("mbit", "Megabit", "Mbit", 131072),
            U("gbit", "Gigabit", "Gbit", 134217728),
            U("tbit", "Terabit", "Tbit", 137438953472),
            # Binary, 1024 based
            U("b", "Byte", "B", 1),
            U("kb", "Kilobyte (Binary)", "KiB", 1024),
            U("mb", "Megabyte (Binary)", "MiB", 1048576),
            U("gb", "Gigabyte (Binary)", "GiB", 1073741824),
            U("tb", "Terabyte (Binary)", "TiB", 1.1e12),
            U("pb", "Petabyte (Binary)", "PiB", 1.13e15),
            U("eb", "Exabyte (Binary)", "EiB", 1.15e18),
            # Decimal, 1000 based
            U("kb_dec", "Kilobyte (Decimal)", "KB", 1000),
            U("mb_dec", "Megabyte (Decimal)", "MB", 1000000),
            U("gb_dec", "Gigabyte (Decimal)", "GB", 1000000000),
            U("tb_dec", "Terabyte (Decimal)", "TB", 1e12),
            U("pb_dec", "Petabyte (Decimal)", "PB", 1e15),
            U("eb_dec", "Exabyte (Decimal)", "EB", 1e18),
            U("nibble", "Nibble", "nibble", 0.5),
            U("word16", "16-bit Word", "word", 2),
            U("word32", "32-bit Word", "dword", 4),
            U("word64", "64-bit Word", "qword", 8),
            # Media
            U("floppy_35", '3.5" Floppy Disk', "floppy", 1474560),
            U("floppy_525", '5.25" Floppy Disk', "floppy", 1228800),
            U("cd", "CD (650 MB)", "CD", 681574400),
            U("cd_700", "CD (700 MB)", "CD", 734003200),
            U("dvd", "DVD (4.7 GB)", "DVD", 5046586572.8),
            U("dvd_dl", "DVD Dual Layer", "DVD-DL", 8547991552),
            U("bluray", "Blu-ray (25 GB)", "BD", 26843545600),
            U("bluray_dl", "Blu-ray Dual Layer", "BD-DL", 53687091200),
        ),
    ),
    UnitCategory(
        id="time",
        name="Time",
        icon="⏰",
        base_unit_id="s",
        units=(
            U("ms", "Millisecond", "ms", 0.001),
            U("s", "Second", "s", 1),
            U("min", "Minute", "min", 60),
            U("hr", "Hour", "hr", 3600),
            U("day", "Day", "day", 86400),
            U("week", "Week", "week", 604800),
            U("month", "Month", "month", 2629746),  # average month
            U("year", "Year", "year", 31556952),  # average year
        ),
    ),
    UnitCategory(
        id="pressure",
        name="Pressure",
        icon="🌪️",
        base_unit_id="pa",
        units=(
            U("pa", "Pascal", "Pa", 1),
            U("kpa", "Kilopascal", "kPa", 1000),
            U("mpa", "Megapascal", "MPa", 1000000),
            U("bar", "Bar", "bar", 100000),
            U("atm", "Atmosphere", "atm", 101325),
            U("psi", "Pounds per Square Inch", "psi", 6895),
            U("torr", "Torr", "Torr", 133.322),
            U("mmhg", "Millimeter of Mercury", "mmHg", 133.322),
            U("inhg", "Inch of Mercury", "inHg", 3386.39),
        ),
    ),
    UnitCategory(
        id="angle",
        name="Angle",
        icon="📐",
        base_unit_id="rad",
        units=(
            U("rad", "Radian", "rad", 1),
            U("deg", "Degree", "°", 0.0174533),
            U("grad", "Gradian", "grad", 0.0157080),
            U("turn", "Turn", "turn", 6.28319),
            U("arcmin", "Arcminute", "'", 0.000290888),
            U("arcsec", "Arcsecond", '"', 0.00000484814),
        ),
    ),
    UnitCategory(
        id="frequency",
        name="Frequency",
        icon="📻",
        base_unit_id="hz",
        units=(
            U("hz", "Hertz", "Hz", 1),
            U("khz", "Kilohertz", "kHz", 1000),
            U("mhz", "Megahertz", "MHz", 1000000),
            U("ghz", "Gigahertz", "GHz", 1000000000),
            U("rpm", "Revolutions per Minute", "rpm", 0.0166667),
            U("rps", "Revolutions per Second", "rps", 1),
        ),
    ),
    UnitCategory(
        id="force",
        name="Force",
        icon="💪",
        base_unit_id="n",
        units=(
            U("n", "Newton", "N", 1),
            U("kn", "Kilonewton", "kN", 1000),
            U("lbf", "Pound Force", "lbf", 4.44822),
            U("kgf", "Kilogram Force", "kgf", 9.80665),
            U("dyn", "Dyne", "dyn", 0.00001),
        ),
    ),
    UnitCategory(
        id="fuel",
        name="Fuel Economy",
        icon="⛽",
        base_unit_id="kmpl",
        kind=CategoryKind.FUEL_ECONOMY,
        units=(
            U("kmpl", "Kilometers per Liter", "km/L", 1),
            U("mpg_us", "Miles per Gallon (US)", "mpg (US)", 0.425144),
            U("mpg_uk", "Miles per Gallon (UK)", "mpg (UK)", 0.354006),
            U("l100km", "Liters per 100 Kilometers", "L/100km", -1),  # reciprocal
        ),
    ),
    UnitCategory(
        id="density",
        name="Density",
        icon="🧱",
        base_unit_id="kgm3",
        units=(
            U("kgm3", "Kilogram per Cubic Meter", "kg/m³", 1),
            U("gcm3", "Gram per Cubic Centimeter", "g/cm³", 1000),
            U("lbft3", "Pound per Cubic Foot", "lb/ft³", 16.0185),
            U("lbin3", "Pound per Cubic Inch", "lb/in³", 27679.9),
        ),
    ),
    UnitCategory(
        id="cooking",
        name="Cooking",
        icon="👨‍🍳",
        base_unit_id="tsp_cook",
        units=(
            U("tsp_cook", "Teaspoon", "tsp", 1),
            U("tbsp_cook", "Tablespoon", "tbsp", 3),
            U("cup_cook", "Cup", "cup", 48),
            U("pint_cook", "Pint", "pt", 96),
            U("quart_cook", "Quart", "qt", 192),
            U("gallon_cook", "Gallon", "gal", 768),
            U("floz_cook", "Fluid Ounce", "fl oz", 6),
            U("ml_cook", "Milliliter", "mL", 4.92892),
            U("l_cook", "Liter", "L", 202.884),
        ),
    ),
    UnitCategory(
        id="illuminance",
        name="Illuminance",
        icon="💡",
        base_unit_id="lux",
        units=(
            U("lux", "Lux", "lx", 1),
            U("footcandle", "Foot-candle", "fc", 10.764),
            U("phot", "Phot", "ph", 10000),
        ),
    ),
    UnitCategory(
        id="radiation",
        name="Radiation",
        icon="☢️",
        base_unit_id="gy",
        units=(
            U("gy", "Gray", "Gy", 1),
            U("rad_dose", "Rad", "rad", 0.01),
            U("sv", "Sievert", "Sv", 1),
            U("rem", "Rem", "rem", 0.01),
            U("bq", "Becquerel", "Bq", 1),
            U("ci", "Curie", "Ci", 37000000000),
        ),
    ),
)

del U

# Units shown when nothing has been pinned yet for a category
DEFAULT_UNITS_BY_CATEGORY: Dict[str, Tuple[str, ...]] = {
    "length": ("m", "cm", "ft", "in", "km", "mm"),
    "weight": ("kg", "g", "lb", "oz", "t", "mg"),
    "volume": ("l", "ml", "cup_us", "gal_us", "m3", "floz_us"),
    "temperature": ("c", "f", "k", "r"),
    "area": ("m2", "ft2", "ha", "ac", "cm2", "km2"),
    "speed": ("kph", "mph", "mps", "knot", "fps"),
    "energy": ("j", "kj", "cal", "kcal", "kwh", "btu"),
    "power": ("w", "kw", "hp", "hp_metric", "mw"),
    "data": ("gb", "mb", "kb", "tb", "gb_dec", "pb"),
    "time": ("s", "min", "hr", "day", "ms", "week"),
    "pressure": ("pa", "psi", "bar", "atm", "kpa", "torr"),
    "angle": ("deg", "rad", "grad", "turn"),
    "frequency": ("hz", "khz", "mhz", "ghz"),
    "force": ("n", "lbf", "kgf", "kn"),
    "fuel": ("kmpl", "mpg_us", "l100km", "mpg_uk"),
    "density": ("kgm3", "gcm3", "lbft3", "lbin3"),
    "cooking": ("cup_cook", "tbsp_cook", "ml_cook", "tsp_cook", "floz_cook"),
    "illuminance": ("lux", "footcandle", "phot"),
    "radiation": ("gy", "sv", "bq", "ci"),
}

_CATEGORIES_BY_ID: Dict[str, UnitCategory] = {category.id: category for category in UNIT_CATEGORIES}


def list_categories() -> Tuple[UnitCategory, ...]:
    return UNIT_CATEGORIES


def get_category(category_id: str) -> Optional[UnitCategory]:
    """Return the category with ``category_id`` or ``None``."""

    return _CATEGORIES_BY_ID.get(category_id)


def get_units_for_category(category_id: str) -> Tuple[Unit, ...]:
    """Return the units of a category, or an empty tuple if it is unknown."""

    category = get_category(category_id)
    return category.units if category else ()


def get_unit(unit_id: str) -> Optional[Tuple[Unit, UnitCategory]]:
    """Find a unit by id across all categories.

    Unit ids are only unique inside a category, so the first category in
    catalog order wins: ``get_unit("c")`` is Celsius, not the speed of light.
    """

    for category in UNIT_CATEGORIES:
        unit = category.get_unit(unit_id)
        if unit is not None:
            return unit, category
    return None


def default_unit_ids(category_id: str) -> List[str]:
    return list(DEFAULT_UNITS_BY_CATEGORY.get(category_id, ()))


__all__ = [
    "CategoryKind",
    "Unit",
    "UnitCategory",
    "UNIT_CATEGORIES",
    "DEFAULT_UNITS_BY_CATEGORY",
    "list_categories",
    "get_category",
    "get_units_for_category",
    "get_unit",
    "default_unit_ids",
]
