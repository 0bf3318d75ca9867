# --------------------------------------------------------------
# File: 1_Fortaleza.py
# Description: Analizador de fortaleza de contraseñas en Streamlit.
# --------------------------------------------------------------

import streamlit as st

from passapi.services import analyze_strength

# Porcentaje de la barra según la clasificación devuelta.
PROGRESS = {"Vulnerable": 0.1, "Weak": 0.35, "Moderate": 0.65, "Strong": 1.0}

st.title("🛡️ Fortaleza")

password = st.text_input("Contraseña", type="password", key="strength_pass")

if password:
    status, body = analyze_strength({"password": password})
    if status != 200:
        st.error(body["message"])
    else:
        rating = body["PasswordStrength"]
        st.progress(PROGRESS[rating], text=f"{rating} · puntuación {body['score']}")
        if rating in ("Vulnerable", "Weak"):
            st.warning(
                "Usa al menos 12 caracteres y combina minúsculas, mayúsculas, "
                "dígitos y símbolos. Evita contraseñas comunes."
            )
        if not body["denylistChecked"]:
            st.caption("La lista de contraseñas comunes no está disponible ahora mismo.")
