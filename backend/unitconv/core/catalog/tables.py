"""Static unit catalog.

Every quantity converts through its SI base unit. Factors give the size of
one unit in base units; temperature scales carry affine transforms with
Kelvin as the base.
"""

from __future__ import annotations

from unitconv.core.catalog.quantity import Quantity, QuantityKey, Unit, linear_unit
from unitconv.core.catalog.transforms import Affine


LENGTH = Quantity(
    key=QuantityKey.LENGTH,
    label="Độ dài",
    base="m",
    units=(
        linear_unit("m", "m (mét)", 1),
        linear_unit("km", "km (kilômét)", 1000),
        linear_unit("cm", "cm (xăng-ti-mét)", 0.01),
        linear_unit("mm", "mm (mili-mét)", 0.001),
        linear_unit("um", "μm (micrômét)", 1e-6),
        linear_unit("nm", "nm (nanômét)", 1e-9),
        linear_unit("pm", "pm (picômét)", 1e-12),
        linear_unit("in", "in (inch)", 0.0254),
        linear_unit("ft", "ft (foot)", 0.3048),
        linear_unit("yd", "yd (yard)", 0.9144),
        linear_unit("mi", "mi (mile)", 1609.344),
        linear_unit("nmi", "nmi (hải lý)", 1852),
        linear_unit("ly", "ly (năm ánh sáng)", 9.4607e15),
    ),
)

MASS = Quantity(
    key=QuantityKey.MASS,
    label="Khối lượng",
    base="kg",
    units=(
        linear_unit("kg", "kg (kilôgam)", 1),
        linear_unit("g", "g (gam)", 0.001),
        linear_unit("mg", "mg (miligam)", 1e-6),
        linear_unit("t", "t (tấn)", 1000),
        linear_unit("lb", "lb (pound)", 0.45359237),
        linear_unit("oz", "oz (ounce)", 0.028349523125),
        linear_unit("st", "st (stone)", 6.35029318),
    ),
)

TIME = Quantity(
    key=QuantityKey.TIME,
    label="Thời gian",
    base="s",
    units=(
        linear_unit("s", "s (giây)", 1),
        linear_unit("ms", "ms (mili-giây)", 1e-3),
        linear_unit("us", "μs (micro-giây)", 1e-6),
        linear_unit("ns", "ns (nano-giây)", 1e-9),
        linear_unit("min", "min (phút)", 60),
        linear_unit("h", "h (giờ)", 3600),
        linear_unit("day", "day (ngày)", 86400),
        linear_unit("week", "week (tuần)", 604800),
        linear_unit("year", "year (năm)", 31557600),  # Julian year
    ),
)

AREA = Quantity(
    key=QuantityKey.AREA,
    label="Diện tích",
    base="m2",
    units=(
        linear_unit("m2", "m² (mét vuông)", 1),
        linear_unit("cm2", "cm² (xăng-ti-mét vuông)", 0.0001),
        linear_unit("mm2", "mm² (mili-mét vuông)", 1e-6),
        linear_unit("km2", "km² (kilômét vuông)", 1e6),
        linear_unit("ha", "ha (hecta)", 10000),
        linear_unit("acre", "acre (mẫu Anh)", 4046.8564224),
        linear_unit("ft2", "ft² (foot vuông)", 0.09290304),
        linear_unit("yd2", "yd² (yard vuông)", 0.83612736),
        # Northern Vietnam
        linear_unit("sao_bac", "sào Bắc Bộ (360 m²)", 360),
        linear_unit("mau_bac", "mẫu Bắc Bộ (3600 m²)", 3600),
        # Central Vietnam
        linear_unit("sao_trung", "sào Trung Bộ (500 m²)", 500),
        linear_unit("mau_trung", "mẫu Trung Bộ (5000 m²)", 5000),
        # Southern Vietnam
        linear_unit("cong", "công (miền Nam) ~ 1000 m²", 1000),
    ),
)

VOLUME = Quantity(
    key=QuantityKey.VOLUME,
    label="Thể tích",
    base="m3",
    units=(
        linear_unit("m3", "m³ (mét khối)", 1),
        linear_unit("L", "L (lít)", 0.001),
        linear_unit("mL", "mL (mililít)", 1e-6),
        linear_unit("cm3", "cm³ (xăng-ti-mét khối)", 1e-6),
        linear_unit("ft3", "ft³ (foot khối)", 0.028316846592),
        linear_unit("in3", "in³ (inch khối)", 1.6387e-5),
        linear_unit("gal_us", "gal (Mỹ)", 0.003785411784),
        linear_unit("gal_uk", "gal (Anh)", 0.00454609),
    ),
)

SPEED = Quantity(
    key=QuantityKey.SPEED,
    label="Vận tốc",
    base="m/s",
    units=(
        linear_unit("m_s", "m/s (mét trên giây)", 1),
        linear_unit("km_h", "km/h (kilômét/giờ)", 1000 / 3600),
        linear_unit("mph", "mph (mile/giờ)", 1609.344 / 3600),
        linear_unit("knot", "knot (hải lý/giờ)", 1852 / 3600),
        linear_unit("ft_s", "ft/s (foot/giây)", 0.3048),
    ),
)

ACCELERATION = Quantity(
    key=QuantityKey.ACCELERATION,
    label="Gia tốc",
    base="m/s2",
    units=(
        linear_unit("m_s2", "m/s² (mét trên giây bình phương)", 1),
        linear_unit("g0", "g (gia tốc trọng trường)", 9.80665),
    ),
)

FORCE = Quantity(
    key=QuantityKey.FORCE,
    label="Lực",
    base="N",
    units=(
        linear_unit("N", "N (Newton)", 1),
        linear_unit("kN", "kN (kilonewton)", 1000),
        linear_unit("lbf", "lbf (pound-force)", 4.4482216152605),
        linear_unit("dyne", "dyne", 1e-5),
    ),
)

PRESSURE = Quantity(
    key=QuantityKey.PRESSURE,
    label="Áp suất",
    base="Pa",
    units=(
        linear_unit("Pa", "Pa (Pascal)", 1),
        linear_unit("kPa", "kPa (kilopascal)", 1000),
        linear_unit("bar", "bar", 1e5),
        linear_unit("atm", "atm (atmosphere)", 101325),
        linear_unit("psi", "psi (pound/in²)", 6894.757293168),
        linear_unit("mmHg", "mmHg (milimét thuỷ ngân)", 133.322387415),
        linear_unit("torr", "torr", 133.322368),
    ),
)

ENERGY = Quantity(
    key=QuantityKey.ENERGY,
    label="Năng lượng",
    base="J",
    units=(
        linear_unit("J", "J (Joule)", 1),
        linear_unit("kJ", "kJ (kilojoule)", 1000),
        linear_unit("cal", "cal (calori)", 4.184),
        linear_unit("kcal", "kcal (kilocalori)", 4184),
        linear_unit("Wh", "Wh (Watt-giờ)", 3600),
        linear_unit("kWh", "kWh (kilowatt-giờ)", 3.6e6),
        linear_unit("eV", "eV (electronvolt)", 1.602176634e-19),
        linear_unit("BTU", "BTU (British Thermal Unit)", 1055.05585),
        linear_unit("erg", "erg", 1e-7),
    ),
)

POWER = Quantity(
    key=QuantityKey.POWER,
    label="Công suất",
    base="W",
    units=(
        linear_unit("W", "W (Watt)", 1),
        linear_unit("kW", "kW (kilowatt)", 1000),
        linear_unit("MW", "MW (megawatt)", 1e6),
        linear_unit("GW", "GW (gigawatt)", 1e9),
        linear_unit("hp", "hp (horsepower)", 745.69987158227022),
    ),
)

TEMPERATURE = Quantity(
    key=QuantityKey.TEMPERATURE,
    label="Nhiệt độ",
    base="K",
    units=(
        Unit("K", "K (Kelvin)", Affine(scale=1.0)),
        Unit("C", "°C (Celsius)", Affine(scale=1.0, offset=273.15)),
        Unit("F", "°F (Fahrenheit)", Affine(scale=5 / 9, offset=273.15, origin=32.0)),
        Unit("R", "°R (Rankine)", Affine(scale=5 / 9)),
    ),
)

DENSITY = Quantity(
    key=QuantityKey.DENSITY,
    label="Khối lượng riêng",
    base="kg/m3",
    units=(
        linear_unit("kg_m3", "kg/m³ (kilôgam trên mét khối)", 1),
        linear_unit("g_cm3", "g/cm³ (gam trên xăng-ti-mét khối)", 1000),
        linear_unit("lb_ft3", "lb/ft³ (pound trên foot khối)", 16.01846337396),
        linear_unit("oz_in3", "oz/in³ (ounce trên inch khối)", 1729.994),
    ),
)


QUANTITIES: dict[QuantityKey, Quantity] = {
    q.key: q
    for q in (
        LENGTH, MASS, TIME, AREA, VOLUME, SPEED, ACCELERATION,
        FORCE, PRESSURE, ENERGY, POWER, TEMPERATURE, DENSITY,
    )
}
