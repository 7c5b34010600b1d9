"""Extracción de texto y metadata del HTML de previews.

Los endpoints de preview devuelven HTML crudo; este módulo lo convierte en
algo legible en terminal (título + texto plano).
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urljoin

from bs4 import BeautifulSoup


def extract_preview_metadata(*, html: str, base_url: str | None = None) -> dict[str, Any]:
    """Extrae metadata ligera del HTML de una preview.

    Devuelve keys opcionales:
    - title
    - preheader (primer bloque con clase `preheader`, habitual en plantillas)
    - images (URLs absolutas si se pasa `base_url`)
    """

    if not html:
        return {}

    soup = BeautifulSoup(html, "html.parser")

    out: dict[str, Any] = {}
    if soup.title and soup.title.string:
        out["title"] = soup.title.string.strip()

    preheader = soup.find(class_="preheader")
    if preheader:
        text = preheader.get_text(" ", strip=True)
        if text:
            out["preheader"] = text

    images: list[str] = []
    for img in soup.find_all("img"):
        src = img.get("src")
        if not src:
            continue
        src = str(src).strip()
        images.append(urljoin(base_url, src) if base_url else src)
    if images:
        out["images"] = images
    return out


def html_to_text(html: str) -> str:
    """Texto plano del cuerpo, una línea por bloque, sin scripts ni estilos."""

    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "head"]):
        tag.decompose()
    lines = (line.strip() for line in soup.get_text("\n").splitlines())
    return "\n".join(line for line in lines if line)
