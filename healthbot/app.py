"""Streamlit chat page for the HealthBot assistant."""

import streamlit as st
import os
import sys

# Ensure project root is on sys.path
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(current_dir)
if project_root not in sys.path:
    sys.path.append(project_root)

from healthbot.config_manager import ConfigManager
from healthbot.ui.relay_client import RelayClient
from healthbot.ui.session import ChatSession
from healthbot.utils.logger import setup_logging

BOT_AVATAR = "🩺"
USER_AVATAR = "👤"
LOADING_TEXT = "..."

WELCOME_TEXT = (
    "HealthBot is your personal AI-powered health assistant. Ask me anything about health, "
    "wellness, symptoms, or healthy living. I can provide information, tips, and support for "
    "your well-being. Please note: I do not provide medical diagnoses or treatment plans."
)

# --- PAGE SETUP ---
ui_config = ConfigManager.get_ui_config()
st.set_page_config(
    page_title=ui_config.get("page_title", "HealthBot"),
    page_icon=ui_config.get("page_icon", BOT_AVATAR),
    layout="wide"
)

# --- CSS STYLES ---
st.markdown("""
<style>
    h1, h2, h3 {
        color: #be123c;
    }

    /* Sidebar */
    [data-testid="stSidebar"] {
        background-color: #fff1f2;
        border-right: 1px solid #ffe4e6;
    }

    /* User messages */
    .stChatMessage[data-testid="stChatMessageUser"] {
        background-color: #f3f4f6;
        border-radius: 16px;
    }

    /* Assistant messages */
    .stChatMessage[data-testid="stChatMessageAssistant"] {
        background-color: #fff1f2;
        border: 1px solid #ffe4e6;
        border-radius: 16px;
        color: #881337;
    }

    .welcome {
        text-align: center;
        padding: 4rem 1rem;
        color: #be123c;
    }
</style>
""", unsafe_allow_html=True)


# --- INITIALIZATION (SINGLETON) ---
@st.cache_resource
def get_client() -> RelayClient:
    """Configure logging once and build the shared relay client."""
    setup_logging()
    return RelayClient.from_config()


client = get_client()

if "chat" not in st.session_state:
    st.session_state.chat = ChatSession()
chat: ChatSession = st.session_state.chat

# --- SIDEBAR ---
with st.sidebar:
    st.markdown(f"## {BOT_AVATAR} HealthBot")
    st.button("+ New Health Chat", on_click=chat.reset_conversation)
    st.caption("Health AI Assistant")

# --- MAIN UI ---
st.title("Health AI Assistant")

# Input is locked while a relay call is in flight
if prompt := st.chat_input("Ask a health question...", disabled=chat.busy):
    if chat.submit(prompt) is not None:
        st.rerun()

if not chat.messages:
    st.markdown(
        f"<div class='welcome'><h2>Welcome to HealthBot!</h2><p>{WELCOME_TEXT}</p></div>",
        unsafe_allow_html=True,
    )

# Render transcript
for message in chat.messages:
    is_user = message.role == "user"
    with st.chat_message("user" if is_user else "assistant", avatar=USER_AVATAR if is_user else BOT_AVATAR):
        st.markdown(message.content)

# Loading bubble while a reply is outstanding
if chat.busy:
    with st.chat_message("assistant", avatar=BOT_AVATAR):
        st.markdown(LOADING_TEXT)

# Pending reply: call the relay, then redraw with the answer
if chat.pending is not None:
    chat.dispatch(client)
    st.rerun()
