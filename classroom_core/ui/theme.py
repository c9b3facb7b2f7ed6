import streamlit as st

from classroom_core.ranking import TIER_CONFIG

# === COLOR PALETTE ===
PRIMARY_COLOR    = "#2563eb"
SECONDARY_COLOR  = "#7c3aed"
SUCCESS_COLOR    = "#10b981"
WARNING_COLOR    = "#f59e0b"
DANGER_COLOR     = "#ef4444"
TEXT_COLOR       = "#1e293b"
SUBTLE_TEXT      = "#64748b"
GRID_COLOR       = "#e2e8f0"
BACKGROUND_COLOR = "#f8fafc"
CARD_BG_LIGHT    = "#ffffff"


def _rank_css() -> str:
    return " ".join(
        f".{config.css_class} {{ background:{config.color}; }}" for config in TIER_CONFIG.values()
    )


def apply_css():
    """Inject the shared Codetrio stylesheet. Call once per page after set_page_config."""
    st.markdown(f"""
        <style>
        .main {{
            background-color: {BACKGROUND_COLOR};
            color: {TEXT_COLOR};
            font-family: 'Inter','Segoe UI','SF Pro Display',sans-serif;
        }}
        .ct-brand {{
            display:flex; gap:.75rem; align-items:center; margin-bottom:.25rem;
        }}
        .ct-brand-icon {{
            background: linear-gradient(135deg, {PRIMARY_COLOR} 0%, {SECONDARY_COLOR} 100%);
            color: white; border-radius: 10px; padding: .35rem .6rem; font-size: 1.4rem;
        }}
        .ct-brand-title {{ margin:0; font-size:1.9rem; font-weight:700; color:{PRIMARY_COLOR}; }}
        .ct-brand-subtitle {{ margin:0; color:{SUBTLE_TEXT}; font-size:.95rem; }}
        .ct-card {{
            background: {CARD_BG_LIGHT}; padding: 1.2rem; border-radius: 14px; margin: .5rem 0;
            border: 1px solid {GRID_COLOR}; box-shadow: 0 4px 8px rgba(0,0,0,0.04);
            transition: box-shadow .2s ease;
        }}
        .ct-card:hover {{ box-shadow: 0 8px 20px rgba(37,99,235,.12); }}
        .ct-card-head {{ display:flex; justify-content:space-between; align-items:center; gap:.5rem; }}
        .ct-card-title {{ margin:0; font-size:1.1rem; font-weight:600; color:{TEXT_COLOR}; }}
        .ct-card-desc {{
            color:{SUBTLE_TEXT}; font-size:.9rem; margin:.5rem 0 .8rem 0;
            display:-webkit-box; -webkit-line-clamp:2; -webkit-box-orient:vertical; overflow:hidden;
        }}
        .ct-card-meta {{ color:{SUBTLE_TEXT}; font-size:.85rem; }}
        .ct-pill {{
            border:1px solid {GRID_COLOR}; border-radius:999px; padding:.1rem .6rem;
            font-size:.75rem; font-weight:600; color:{TEXT_COLOR}; white-space:nowrap;
        }}
        .ct-role-admin {{ background:{PRIMARY_COLOR}; color:white; border-color:{PRIMARY_COLOR}; }}
        .ct-role-student {{ background:{GRID_COLOR}; color:{TEXT_COLOR}; }}
        .ct-empty {{ text-align:center; padding:3rem 1rem; }}
        .ct-empty-icon {{ font-size:3.5rem; opacity:.6; }}
        .ct-demo {{ text-align:center; font-size:.875rem; color:{SUBTLE_TEXT}; margin-top:1.5rem; }}
        .ct-rank {{
            display:inline-flex; align-items:center; gap:.25rem; border-radius:999px;
            color:white; font-weight:600; line-height:1.2;
        }}
        {_rank_css()}
        .ct-rank-points  {{ margin-left:.25rem; opacity:.9; }}
        .ct-loading {{ min-height:60vh; display:flex; align-items:center; justify-content:center; }}
        .ct-spinner {{
            width:8rem; height:8rem; border-radius:50%;
            border-bottom:2px solid {PRIMARY_COLOR}; animation: ct-spin 1s linear infinite;
        }}
        @keyframes ct-spin {{ to {{ transform: rotate(360deg); }} }}
        .stButton button {{ border-radius: 10px; font-weight: 600; }}
        </style>
    """, unsafe_allow_html=True)
