"""
Montage des fichiers statiques.
Expose /static -> répertoire public (css, js du formulaire).
"""
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from backend.config import PUBLIC_DIR

def mount_static_files(app: FastAPI) -> None:
    app.mount("/static", StaticFiles(directory=str(PUBLIC_DIR)), name="static")
