"""Simple two-language (zh_tw/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "zh_tw": "天氣查詢",
        "en": "WeatherSky",
    },
    "label_city": {
        "zh_tw": "輸入城市",
        "en": "City",
    },
    "btn_query": {
        "zh_tw": "查詢天氣",
        "en": "Check Weather",
    },
    "btn_more": {
        "zh_tw": "更多資訊",
        "en": "More Info",
    },
    "btn_back": {
        "zh_tw": "返回",
        "en": "Back",
    },
    "btn_unit": {
        "zh_tw": "°C / °F",
        "en": "°C / °F",
    },
    "btn_uv_icon": {
        "zh_tw": "切換紫外線顯示",
        "en": "Toggle UV view",
    },
    "loading": {
        "zh_tw": "查詢中",
        "en": "Loading",
    },
    "current_condition": {
        "zh_tw": "目前天氣：{text}",
        "en": "Now: {text}",
    },
    "temperature": {
        "zh_tw": "溫度：{value}",
        "en": "Temperature: {value}",
    },
    "humidity": {
        "zh_tw": "濕度：{value}%",
        "en": "Humidity: {value}%",
    },
    "uv_index": {
        "zh_tw": "紫外線指數：{value}",
        "en": "UV index: {value}",
    },
    "more_title": {
        "zh_tw": "更多天氣資訊",
        "en": "More Weather Info",
    },
    "info_wind_speed": {
        "zh_tw": "風速",
        "en": "Wind",
    },
    "info_rain": {
        "zh_tw": "雨量",
        "en": "Rain",
    },
    "info_wind_dir": {
        "zh_tw": "風向",
        "en": "Direction",
    },
    "info_feelslike": {
        "zh_tw": "體感溫度",
        "en": "Feels like",
    },
    "info_sunrise": {
        "zh_tw": "日出時間",
        "en": "Sunrise",
    },
    "info_sunset": {
        "zh_tw": "日落",
        "en": "Sunset",
    },
}

_WEEKDAYS: dict[str, tuple[str, ...]] = {
    # Monday first, matching datetime.weekday()
    "zh_tw": ("星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日"),
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key


def weekday_name(weekday: int, lang: str) -> str:
    """Weekday label for datetime.weekday() (0 = Monday)."""
    names = _WEEKDAYS.get(lang) or _WEEKDAYS["en"]
    return names[weekday]


def normalize_lang(browser_lang: str | None) -> str:
    """Map a navigator.language tag to a supported UI language."""
    if browser_lang and browser_lang.lower().replace("-", "_").startswith("zh"):
        return "zh_tw"
    return "en"
