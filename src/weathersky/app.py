"""WeatherSky — Streamlit app: city weather over an animated day/night sky."""

import html

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from weathersky.config import load_settings  # noqa: E402
from weathersky.display import (  # noqa: E402
    background_gradient,
    format_localtime,
    format_temperature,
    format_temperature_range,
    format_uv,
    icon_url,
    larger_icon_url,
    more_info_items,
    uv_color,
    weekday_label,
)
from weathersky.i18n import normalize_lang, t  # noqa: E402
from weathersky.models import WeatherResponse  # noqa: E402
from weathersky.renderers.plotly_2d import render_plotly_sky  # noqa: E402
from weathersky.renderers.svg_2d import render_sky_svg  # noqa: E402
from weathersky.sky import ClockDriver, compose_frame  # noqa: E402
from weathersky.weather import fetch_weather  # noqa: E402

_settings = load_settings()

# Logical phone-sized canvas; the SVG scales to the viewport with "slice"
_SKY_WIDTH = 390
_SKY_HEIGHT = 844

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = normalize_lang(_browser_lang)

_lang: str = st.session_state.get("lang", "zh_tw" if _settings.lang.startswith("zh") else "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="☀",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---

if "weather" not in st.session_state:
    st.session_state.weather = None
if "city" not in st.session_state:
    st.session_state.city = _settings.default_city
if "fahrenheit" not in st.session_state:
    st.session_state.fahrenheit = False
if "show_uv_icon" not in st.session_state:
    st.session_state.show_uv_icon = False
if "show_more" not in st.session_state:
    st.session_state.show_more = False
if "shake_key" not in st.session_state:
    st.session_state.shake_key = 0
if "driver" not in st.session_state:
    st.session_state.driver = ClockDriver(
        period=_settings.tick_seconds, increment=_settings.tick_increment
    )

# --- Theme CSS ---
_weather: WeatherResponse | None = st.session_state.weather
_text_color = "#111111" if _weather is None else "#ffffff"
_bg_top, _bg_bottom = background_gradient(_weather)

st.markdown(
    f"""
    <style>
    [data-testid="stHeader"], [data-testid="stToolbar"] {{
        display: none !important;
    }}
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {{
        background: linear-gradient(135deg, {_bg_top}, {_bg_bottom}) !important;
    }}
    [data-testid="stMainBlockContainer"] {{
        max-width: 340px !important;
        padding-top: 3rem !important;
        position: relative;
        z-index: 10;
    }}
    /* Animated sky sits behind the card */
    .sky-layer, .st-key-sky_layer {{
        position: fixed;
        inset: 0;
        z-index: 0;
        pointer-events: none;
    }}
    [data-testid="stElementContainer"]:has(.sky-layer) {{
        all: unset !important;
    }}
    .card, .card p, .card span, label, [data-testid="stWidgetLabel"] p {{
        color: {_text_color} !important;
        text-align: center;
    }}
    .city-title {{
        font-size: 2rem;
        font-weight: 700;
        white-space: nowrap;
        overflow: hidden;
        text-overflow: ellipsis;
    }}
    /* Card flip between the main and "more info" faces */
    @keyframes flip-in {{
        from {{ transform: perspective(800px) rotateY(-180deg); opacity: 0; }}
        to   {{ transform: perspective(800px) rotateY(0deg); opacity: 1; }}
    }}
    .card {{
        animation: flip-in 0.6s ease-in-out;
        backface-visibility: hidden;
    }}
    /* Condition icon swings back and forth */
    @keyframes shake {{
        from {{ transform: rotate(-25deg); }}
        to   {{ transform: rotate(26deg); }}
    }}
    .condition-icon {{
        width: 128px;
        height: 128px;
        display: block;
        margin: 0 auto;
        animation: shake 0.75s ease-in-out infinite alternate;
    }}
    .forecast-row {{
        display: flex;
        align-items: center;
        justify-content: space-between;
        margin: 0.3rem 0;
    }}
    .forecast-row img {{ width: 32px; height: 32px; }}
    .divider {{
        height: 1px;
        margin: 0.8rem 0;
        background: linear-gradient(to right, rgba(255,255,255,0), rgba(255,255,255,0.9), rgba(255,255,255,0));
    }}
    .info-grid {{
        display: grid;
        grid-template-columns: 1fr 1fr;
        gap: 22px;
    }}
    .info-item {{ min-height: 55px; }}
    .info-item .icon {{ font-size: 22px; }}
    .info-item .value {{ font-weight: 600; }}
    .info-item .label {{ font-size: 0.8rem; }}
    .uv-dot {{
        display: inline-block;
        width: 1rem;
        height: 1rem;
        border-radius: 50%;
        vertical-align: middle;
    }}
    </style>
    """,
    unsafe_allow_html=True,
)


# --- Animated sky (only while no weather is shown) ---
# The fragment reruns on a wall-clock interval; the driver converts elapsed
# wall time into ticks, so cycle speed does not depend on the refresh rate.
@st.fragment(run_every=_settings.frame_seconds)
def _sky_background() -> None:
    clock = st.session_state.driver.poll()
    frame = compose_frame(clock, _SKY_WIDTH, _SKY_HEIGHT, _settings.star_count)
    if _settings.renderer == "plotly":
        # st.container(key=...) renders with class st-key-sky_layer, pinned by the CSS above
        with st.container(key="sky_layer"):
            st.plotly_chart(
                render_plotly_sky(frame),
                use_container_width=True,
                config={"displayModeBar": False, "staticPlot": True},
            )
    else:
        st.markdown(
            f"<div class='sky-layer'>{render_sky_svg(frame)}</div>",
            unsafe_allow_html=True,
        )


if _weather is None:
    _sky_background()


def _html(markup: str) -> None:
    st.markdown(markup, unsafe_allow_html=True)


def _main_face(weather: WeatherResponse | None) -> None:
    city = st.text_input(t("label_city", _lang), key="city")
    if st.button(t("btn_query", _lang), key="query_btn", use_container_width=True) and city:
        with st.spinner(t("loading", _lang)):
            st.session_state.weather = fetch_weather(city, settings=_settings)
        st.session_state.shake_key += 1
        st.session_state.show_more = False
        st.rerun()

    if weather is None:
        return

    fahrenheit = st.session_state.fahrenheit
    loc = weather.location
    cur = weather.current
    forecast_rows = "".join(
        f"<div class='forecast-row'>"
        f"<span style='width:56px;text-align:left'>{html.escape(weekday_label(day.date, _lang))}</span>"
        f"<img src='{html.escape(icon_url(day.day.condition.icon))}' alt=''/>"
        f"<span style='width:80px;text-align:right'>"
        f"{format_temperature_range(day.day.mintemp_c, day.day.maxtemp_c, fahrenheit)}</span>"
        f"</div>"
        for day in weather.forecast_days[:3]
    )
    if st.session_state.show_uv_icon:
        uv_markup = f"<span class='uv-dot' style='background:{uv_color(cur.uv)}'></span>"
    else:
        uv_markup = format_uv(cur.uv)

    _html(
        f"<div class='card' data-shake='{st.session_state.shake_key}'>"
        f"<p class='city-title'>◎ {html.escape(loc.name)}, {html.escape(loc.country)}</p>"
        f"<p>{html.escape(format_localtime(loc))}</p>"
        f"<p>{html.escape(t('current_condition', _lang).format(text=cur.condition.text))}</p>"
        f"<p>{t('temperature', _lang).format(value=format_temperature(cur.temp_c, fahrenheit))}</p>"
        f"<p>{t('humidity', _lang).format(value=cur.humidity)}</p>"
        f"<p>{t('uv_index', _lang).format(value=uv_markup)}</p>"
        f"<img class='condition-icon' src='{html.escape(larger_icon_url(cur.condition.icon))}' alt=''/>"
        f"{forecast_rows}"
        f"<div class='divider'></div>"
        f"</div>"
    )

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button(t("btn_unit", _lang), key="unit_btn", use_container_width=True):
            st.session_state.fahrenheit = not fahrenheit
            st.rerun()
    with col2:
        if st.button("UV", key="uv_btn", help=t("btn_uv_icon", _lang), use_container_width=True):
            st.session_state.show_uv_icon = not st.session_state.show_uv_icon
            st.rerun()
    with col3:
        if st.button(t("btn_more", _lang), key="more_btn", use_container_width=True):
            st.session_state.show_more = True
            st.rerun()


def _more_face(weather: WeatherResponse) -> None:
    fahrenheit = st.session_state.fahrenheit
    cells = "".join(
        f"<div class='info-item'>"
        f"<div class='icon'>{item.icon}</div>"
        f"<div class='value'>{html.escape(item.value)}</div>"
        f"<div class='label'>{html.escape(item.label)}</div>"
        f"</div>"
        for item in more_info_items(weather, fahrenheit, _lang)
    )
    _html(
        f"<div class='card'>"
        f"<h3>{t('more_title', _lang)}</h3>"
        f"<div class='info-grid'>{cells}</div>"
        f"</div>"
    )
    col1, col2 = st.columns(2)
    with col1:
        if st.button(t("btn_unit", _lang), key="unit_btn_more", use_container_width=True):
            st.session_state.fahrenheit = not fahrenheit
            st.rerun()
    with col2:
        if st.button(t("btn_back", _lang), key="back_btn", use_container_width=True):
            st.session_state.show_more = False
            st.rerun()


if st.session_state.show_more and _weather is not None:
    _more_face(_weather)
else:
    _main_face(_weather)
