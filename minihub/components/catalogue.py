# components/catalogue.py
# Tool catalogue shown on the list view, grouped by category.

from typing import Dict, Iterator, List, Optional, Tuple

FUEL_COST = "Gerador de Orçamento de Combustível"
PASSIVE_INCOME = "Calculadora de renda passiva"
PERCENTAGE = "Calculos de porcentagem"
PASSWORD = "Gerador de Senhas"

# Accent colours per category (header text / background / primary button)
CATEGORY_COLORS: Dict[str, Dict[str, str]] = {
    "math-finance": {"text": "#166534", "bg": "#DCFCE7", "primary": "#16A34A"},
    "productivity": {"text": "#1E40AF", "bg": "#DBEAFE", "primary": "#2563EB"},
    "web-dev-utils": {"text": "#3730A3", "bg": "#E0E7FF", "primary": "#4F46E5"},
}

TOOL_CATEGORIES: List[Dict] = [
    {
        "id": "math-finance",
        "name": "Matemática e Finanças",
        "tools": [
            {"title": FUEL_COST, "icon": "⛽"},
            {"title": PASSIVE_INCOME, "icon": "💰"},
            {"title": PERCENTAGE, "icon": "➗"},
        ],
    },
    {
        "id": "productivity",
        "name": "Produtividade",
        "tools": [],
    },
    {
        "id": "web-dev-utils",
        "name": "Utilitários Web e Dev",
        "tools": [{"title": PASSWORD, "icon": "🔒"}],
    },
]


def iter_tools() -> Iterator[Tuple[Dict, Dict]]:
    """Yield ``(category, tool)`` pairs in display order."""
    for category in TOOL_CATEGORIES:
        for tool in category["tools"]:
            yield category, tool


def get_tool_info(title: str) -> Optional[Dict]:
    """Return the tool named ``title`` merged with its category colours, or None."""
    for category, tool in iter_tools():
        if tool["title"] == title:
            return {**tool, "category": category["id"], "colors": CATEGORY_COLORS[category["id"]]}
    return None


__all__ = [
    "FUEL_COST",
    "PASSIVE_INCOME",
    "PERCENTAGE",
    "PASSWORD",
    "CATEGORY_COLORS",
    "TOOL_CATEGORIES",
    "iter_tools",
    "get_tool_info",
]
