import streamlit as st

GLOBAL_CSS = """
<style>
.block-container {
    padding-top: 2rem;
}

.rm-card {
  border-radius:18px;
  padding:12px;
  background:#ffffff;
  border:1px solid rgba(0,0,0,0.08);
  margin-bottom:10px;
}

.rm-id-left {
    display:flex;
    align-items:center;
    gap:10px;
}
.rm-avatar {
  width:36px; height:36px; border-radius:50%; background:#dbeafe; color:#2563eb;
  display:grid; place-items:center; font-weight:800; letter-spacing:.5px;
}
.rm-name {font-weight:700; line-height:1.05;}
.rm-sub {font-size:11px; opacity:.7}

.rm-v .lab {font-size:11px; opacity:.65;}
.rm-v .val {font-size:22px; font-weight:800;}

.val-ok  { color:#065f46; }
.val-mod { color:#ca8a04; }
.val-sev { color:#dc2626; }

.pill {font-size:11px; border-radius:9px; padding:1px 8px; border:1px solid; margin-right:4px;}
.pill-ok    { color:#15803d; background:#f0fdf4; border-color:#bbf7d0; }
.pill-mod   { color:#a16207; background:#fefce8; border-color:#fef08a; }
.pill-sev   { color:#b91c1c; background:#fef2f2; border-color:#fecaca; }
.pill-muted { color:#374151; background:#f9fafb; border-color:#e5e7eb; }
</style>
"""


def inject() -> None:
    """Inject global CSS into the Streamlit page."""
    st.markdown(GLOBAL_CSS, unsafe_allow_html=True)
