# app.py
# Streamlit UI for the nearest-neighbor tour builder
# Run: streamlit run app.py

import io
from typing import List

import streamlit as st

import config
from NearestNeighbor import best_start_tour, build_nearest_neighbor_tour
from load_tsp import TspInstance, load_tsp_instance, parse_tsp_lines
from render_tour import format_tour, format_weight
from tsp_errors import TourError
from visualize_tour import plot_tour

@st.cache_data(show_spinner=False)
def load_sample(path: str) -> TspInstance:
    return load_tsp_instance(path)

def load_upload(data: bytes) -> TspInstance:
    return parse_tsp_lines(io.StringIO(data.decode('utf-8', errors='replace')))

def point_label(ids: List[int], i: int) -> str:
    return f"City {ids[i]}"

# app UI

st.set_page_config(**config.STREAMLIT_CONFIG)

st.title("🧭 Nearest-Neighbor Tour")
st.write("Greedy TSP tour over the cities of a `.tsp` file")

samples = config.get_sample_paths()

with st.sidebar:
    st.header("⚙️ Setting")
    integral = st.checkbox("Integer weights", value=config.INTEGRAL_WEIGHTS,
                           help="Truncate each edge weight like the legacy output.")
    tie_break = st.selectbox("Tie break", config.TIE_BREAK_CHOICES,
                             index=config.TIE_BREAK_CHOICES.index(config.TIE_BREAK))
    best_start = st.checkbox("Try every start", value=False)
    workers = st.number_input("Workers", min_value=1, max_value=64, value=config.DEFAULT_WORKERS)
    st.divider()

    st.subheader("Input")
    uploaded = st.file_uploader("Upload .tsp", type=["tsp", "txt"])
    sample_name = st.selectbox("Or pick a sample", list(samples.keys())) if samples else None

try:
    if uploaded is not None:
        instance = load_upload(uploaded.getvalue())
    elif sample_name:
        instance = load_sample(samples[sample_name])
    else:
        st.info("Upload a .tsp file to start.")
        st.stop()
except TourError as e:
    st.error(str(e))
    st.stop()

if not instance.points:
    st.error("No cities found. Is the NODE_COORD_SECTION marker missing?")
    st.stop()

ids = [p.id for p in instance.points]
colA, colB = st.columns([0.38, 0.62], gap="large")

with colA:
    st.subheader(f"📍 {instance.name or 'Cities'} ({len(ids)})")
    start_idx = st.selectbox("Start city", range(len(ids)),
                             format_func=lambda i: point_label(ids, i), disabled=best_start)
    run = st.button("🔎 Build tour", type="primary", use_container_width=True)

with colB:
    st.subheader("Tour")
    if run:
        options = dict(integral=integral, tie_break=tie_break)
        try:
            with st.spinner("Building tour..."):
                if best_start:
                    tour = best_start_tour(instance.points, workers=int(workers), **options)
                else:
                    tour = build_nearest_neighbor_tour(instance.points, ids[start_idx], **options)
        except TourError as e:
            st.error(str(e))
            st.stop()

        st.markdown(f"**Start:** {tour.start.id} &nbsp; **Total:** {format_weight(tour.total_distance)}")
        st.pyplot(plot_tour(tour, filepath=config.get_output_path(config.DEFAULT_TOUR_FILENAME)))

        with st.expander("📌 Edge listing"):
            st.code("\n".join(format_tour(tour)))

st.caption("Nearest-Neighbor Tour Builder")
