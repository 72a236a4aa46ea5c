"""Weather category → icon asset mapping."""

from __future__ import annotations

from forecast_table.model import SLOT_PERIODS, TimePeriod, WeatherCategory

SUN_ICON = "sun_icon.svg"
MOON_STARS_ICON = "moon_stars_icon.svg"
MOON_CLOUD_ICON = "moon_cloud_icon.svg"
RAIN_ICON = "rain_icon.svg"
LIGHTNING_ICON = "cloud_strong_lightning_icon.svg"

ALL_ICONS = (SUN_ICON, MOON_STARS_ICON, MOON_CLOUD_ICON, RAIN_ICON, LIGHTNING_ICON)

DEFAULT_ICON = MOON_CLOUD_ICON

# Snow and Atmosphere have no dedicated artwork yet and reuse the nearest match.
_CATEGORY_ICON: dict[WeatherCategory, str] = {
    WeatherCategory.CLOUDS: MOON_CLOUD_ICON,
    WeatherCategory.RAIN: RAIN_ICON,
    WeatherCategory.DRIZZLE: RAIN_ICON,
    WeatherCategory.THUNDERSTORM: LIGHTNING_ICON,
    WeatherCategory.SNOW: RAIN_ICON,
    WeatherCategory.ATMOSPHERE: MOON_CLOUD_ICON,
}


def period_for_slot(index: int) -> TimePeriod:
    return SLOT_PERIODS[index]


def icon_for(main_weather: str, period: TimePeriod) -> str:
    """Return the icon file name for a weather category at a time of day.

    Unknown categories get ``DEFAULT_ICON``.
    """
    try:
        category = WeatherCategory(main_weather)
    except ValueError:
        return DEFAULT_ICON
    if category is WeatherCategory.CLEAR:
        return MOON_STARS_ICON if period is TimePeriod.NIGHT else SUN_ICON
    return _CATEGORY_ICON.get(category, DEFAULT_ICON)


def icon_src(file_name: str, base: str) -> str:
    base = base.rstrip("/")
    return f"{base}/{file_name}" if base else file_name
