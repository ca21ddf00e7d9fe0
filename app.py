# app.py
# Streamlit UI for the nearest-neighbor tour planner
# Run: pip install -e . && streamlit run app.py
# (the planner modules live under src/ and are importable once installed)

from typing import List

import folium
import streamlit as st
from streamlit.components.v1 import html as st_html

import config
from calcDist import tour_distance
from fetch_locations import LocationProviderError, fetch_random_locations, parse_location_input
from NearestNeighbor import solve_nearest_neighbor
from point import Point
from visualize_map import build_tour_map


def format_coord(lat: float, lon: float) -> str:
    return f"{lat:.6f}, {lon:.6f}"


def render_folium(m: folium.Map, height: int = config.MAP_SETTINGS['height']):
    st_html(m.get_root().render(), height=height)


def collect_points(count: int, manual_text: str) -> List[Point]:
    points = fetch_random_locations(count) if count > 0 else []
    for line in manual_text.splitlines():
        if line.strip():
            points.append(parse_location_input(line))
    return points


st.set_page_config(**config.STREAMLIT_CONFIG)
config.configure_logging()

st.title(config.UI_TEXT['app_title'])
st.caption(config.UI_TEXT['tagline'])

with st.sidebar:
    st.header("⚙️ Setting")
    count = st.slider("Random locations", min_value=0, max_value=config.MAX_LOCATION_COUNT,
                      value=config.DEFAULT_LOCATION_COUNT)
    manual_text = st.text_area("Extra locations (one per line)",
                               help="Either 'lat, lon' or a place name.")
    run = st.button("🔎 Build tour", type="primary", use_container_width=True)

if run:
    try:
        with st.spinner("Fetching locations..."):
            points = collect_points(count, manual_text)
        tour = solve_nearest_neighbor(points)
    except (LocationProviderError, ValueError) as e:
        st.error(str(e))
        st.stop()

    st.markdown(f"**{len(points)} stops** · planar length {tour_distance(tour):.4f}°")

    colA, colB = st.columns([0.38, 0.62], gap="large")
    with colA:
        st.subheader("Visiting order")
        st.table([{"#": i, "name": p.name, "coordinates": format_coord(p.lat, p.lon)}
                  for i, p in enumerate(tour, start=1)])
    with colB:
        render_folium(build_tour_map(tour))
else:
    st.info("Pick how many locations to visit in the sidebar, then press 'Build tour'.")
