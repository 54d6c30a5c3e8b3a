import os

import requests
import streamlit as st

API_URL = os.environ.get("RENDER_API_URL", "http://localhost:8080/render")

st.set_page_config(page_title="Website Reel Renderer", page_icon="🎬", layout="centered")

st.title("🎬 Website Reel Renderer")
st.write("Turn a web page and an audio clip into a short branded video.")

with st.form("render_form"):
    website_url = st.text_input("Website URL", placeholder="e.g., example.com")
    audio_url = st.text_input("Audio URL", placeholder="https://.../voiceover.mp3")
    logo_url = st.text_input("Logo URL (optional)", placeholder="https://.../logo.png")

    col1, col2 = st.columns(2)
    with col1:
        brand_line1 = st.text_input("Intro title", value="")
        brand_line2 = st.text_input("Intro subtitle", value="")
    with col2:
        cta_line1 = st.text_input("Call to action", value="")
        cta_line2 = st.text_input("Call to action, second line", value="")

    submitted = st.form_submit_button("Render Video")

if submitted:
    if not website_url.strip() or not audio_url.strip():
        st.error("Please enter both a website URL and an audio URL.")
    else:
        with st.spinner("Rendering video. This may take a minute..."):
            payload = {
                "website_url": website_url,
                "audio_url": audio_url,
            }
            # Blank inputs fall back to the server's configured text
            optional = {
                "logo_url": logo_url,
                "brand_line1": brand_line1,
                "brand_line2": brand_line2,
                "cta_line1": cta_line1,
                "cta_line2": cta_line2,
            }
            payload.update({k: v for k, v in optional.items() if v.strip()})
            try:
                resp = requests.post(API_URL, json=payload, timeout=None)
                if resp.status_code != 200:
                    body = resp.json()
                    st.error(f"{body.get('error', 'Render failed')}: {body.get('details', '')}")
                else:
                    video_bytes = resp.content
                    if not video_bytes:
                        st.error("No video bytes returned from API.")
                    else:
                        st.success("Video rendered!")
                        st.video(video_bytes, format='video/mp4')
                        st.download_button(
                            label="Download video",
                            data=video_bytes,
                            file_name="website_reel.mp4",
                            mime="video/mp4",
                        )
            except requests.RequestException as e:
                st.error(f"API error: {e}")
