# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from passcore.runtime import init_runtime

# Falla rápido si la clave AES o la configuración del hasher no son válidas.
init_runtime()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="PassCore", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 PassCore")
st.write(
    "Gestor de contraseñas: análisis de fortaleza, cifrado AES-256-GCM y "
    "detección de contraseñas reutilizadas sin exponer el texto en claro."
)
st.info("Empieza por **Fortaleza** para analizar una contraseña o por **Generador** para crear una.")
