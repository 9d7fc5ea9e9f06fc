import streamlit as st

from matching.matcher import loose_rank, match_results, predict
from matching.models import CandidateProfile
from parsing.profile import extract_profile, parse_skill_list
from services.config import configure_logging, get_settings
from services.frames import loose_frame, results_frame
from services.jobs import load_catalog

st.set_page_config(page_title="Placement Predictor", page_icon="🎓", layout="wide")

settings = get_settings()
configure_logging(settings.log_level)


@st.cache_data(show_spinner="Loading job catalog…")
def _catalog(source: str):
    return load_catalog(source)


def _init_state():
    ss = st.session_state
    ss.setdefault("resume_profile", None)
    ss.setdefault("profile", CandidateProfile())


_init_state()

try:
    catalog = _catalog(settings.catalog_source)
except Exception as e:
    st.error(f"Could not load job catalog from {settings.catalog_source}: {e}")
    st.stop()

st.caption(f"{len(catalog)} postings in catalog")
tab_resume, tab_predict = st.tabs(["Resume Matching", "Placement Prediction"])


# --- Resume Matching: placeholder extraction + any-overlap discovery ---
with tab_resume:
    st.subheader("Upload your resume")
    file = st.file_uploader("Resume (PDF)", type=["pdf"], accept_multiple_files=False)
    if file is not None and st.session_state.resume_profile is None:
        st.session_state.resume_profile = extract_profile(file.getvalue())

    prof = st.session_state.resume_profile
    if prof is None:
        st.info("Upload a resume to see matching jobs.")
    else:
        st.markdown(f"**{prof.name}** · {prof.branch} · CGPA {prof.cgpa}")
        edited = st.text_input("Skills (comma-separated)", ", ".join(prof.skills), key="resume_skills")
        prof = prof.with_skills(parse_skill_list(edited))
        st.session_state.resume_profile = prof

        jobs = loose_rank(prof, catalog)
        if not jobs:
            st.warning("No postings share any of these skills.")
        else:
            st.dataframe(loose_frame(prof, jobs), use_container_width=True, hide_index=True)


# --- Placement Prediction: strict ranking + summary ---
with tab_predict:
    st.subheader("Your skills")
    with st.form(key="prediction_form"):
        skills_text = st.text_area("One skill per line (or comma-separated)", "\n".join(st.session_state.profile.skills))
        submitted = st.form_submit_button("Predict placement", type="primary")
    if submitted:
        st.session_state.profile = st.session_state.profile.with_skills(parse_skill_list(skills_text))

        profile = st.session_state.profile
        summary = predict(profile, catalog)
        if summary.is_fallback:
            st.warning("No posting meets the match threshold yet.")
        c1, c2, c3 = st.columns(3)
        c1.metric("Predicted role", summary.predicted_role)
        c2.metric("Salary range", summary.predicted_salary_range)
        c3.metric("Confidence", f"{summary.confidence:.0%}")
        st.markdown("**Companies:** " + ", ".join(summary.predicted_companies))

        results = match_results(profile, catalog)
        if results:
            st.markdown("### Qualifying jobs")
            st.dataframe(results_frame(results), use_container_width=True, hide_index=True)
