# --------------------------------------------------------------
# File: 3_Boveda.py
# Description: Bóveda de demostración en sesión: alta, duplicados y descifrado.
# --------------------------------------------------------------

import streamlit as st

from passapi.services import prepare_password_entry, reveal_password

st.title("🗄️ Bóveda")

# Los registros solo viven en la sesión; la persistencia real es externa.
entries = st.session_state.setdefault("vault_entries", [])

with st.form("add_entry", clear_on_submit=True):
    site_name = st.text_input("Sitio")
    site_url = st.text_input("URL", placeholder="https://")
    password = st.text_input("Contraseña", type="password")
    category = st.selectbox("Categoría", ["", "personal", "work", "finance"])
    submitted = st.form_submit_button("Guardar")

if submitted:
    status, body = prepare_password_entry(
        {
            "site_name": site_name,
            "site_url": site_url,
            "password": password,
            "category": category or None,
        },
        existing=entries,
    )
    if status == 201:
        entries.append(body["entry"])
        st.success(f"Guardada ({body['entry'].strength.value}).")
        if body["duplicate"]:
            st.warning("Ya usas esta contraseña en: " + ", ".join(body["duplicateOf"]))
    elif status == 400:
        st.error("Datos no válidos: revisa el sitio, la URL y la longitud (8-64).")
    else:
        st.error(body["message"])

for index, entry in enumerate(entries):
    with st.expander(f"{entry.site_name} · {entry.strength.value}"):
        st.caption(entry.site_url)
        if st.button("Mostrar", key=f"reveal_{index}"):
            status, body = reveal_password(entry)
            if status == 200:
                st.code(body["password"])
            else:
                st.error(body["message"])
