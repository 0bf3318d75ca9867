# --------------------------------------------------------------
# File: 2_Generador.py
# Description: Generador de contraseñas y passphrases en Streamlit.
# --------------------------------------------------------------

import streamlit as st

from passapi.services import generate_passphrase, generate_password

st.title("🎲 Generador")

tab_pw, tab_phrase = st.tabs(["Contraseña", "Passphrase"])

# Contraseña aleatoria con las clases de caracteres elegidas.
with tab_pw:
    length = st.slider("Longitud", min_value=8, max_value=64, value=16)
    col1, col2 = st.columns(2)
    with col1:
        upper = st.checkbox("Mayúsculas", value=True)
        lower = st.checkbox("Minúsculas", value=True)
        numbers = st.checkbox("Dígitos", value=True)
    with col2:
        symbols = st.checkbox("Símbolos", value=True)
        similar = st.checkbox("Excluir caracteres parecidos", value=False)

    if st.button("Generar contraseña", key="btn_password"):
        status, body = generate_password(
            {
                "length": length,
                "include_uppercase": upper,
                "include_lowercase": lower,
                "include_numbers": numbers,
                "include_symbols": symbols,
                "exclude_similar": similar,
            }
        )
        if status == 200:
            st.code(body["password"])
            st.caption(f"{body['PasswordStrength']} · puntuación {body['score']}")
        else:
            st.error(body["message"])

# Passphrase tipo Diceware.
with tab_phrase:
    words = st.slider("Palabras", min_value=4, max_value=12, value=6)
    separator = st.selectbox("Separador", [" ", "-", "_", "."], index=1)
    add_number = st.checkbox("Añadir dígito", key="phrase_num")
    add_symbol = st.checkbox("Añadir símbolo", key="phrase_sym")

    if st.button("Generar passphrase", key="btn_phrase"):
        status, body = generate_passphrase(
            {
                "word_count": words,
                "include_numbers": add_number,
                "include_symbols": add_symbol,
                "separator": separator,
            }
        )
        if status == 200:
            st.code(body["passphrase"])
            st.caption(f"{body['PasswordStrength']} · puntuación {body['score']}")
        else:
            st.error(body["message"])
