"""Display placeholders and colour codes."""

UNKNOWN_DEPARTMENT = "Departamento Desconhecido"
UNKNOWN_EMPLOYEE = "Desconhecido"
EMPLOYEE_ID_FALLBACK = "ID {id}"

STATUS_AVAILABLE = "available"
STATUS_UNAVAILABLE = "unavailable"

STATUS_LABELS = {
    STATUS_AVAILABLE: "Disponível",
    STATUS_UNAVAILABLE: "Indisponível",
}

INVALID_SCHEDULE_LABEL = "Formato inválido"

DEFAULT_DEPARTMENT_COLOR = "#cccccc"

DEPARTMENT_COLORS = {
    "Vendas": "#4caf50",
    "TI": "#2196f3",
    "RH": "#ff9800",
    "Marketing": "#e91e63",
    "Produção": "#9c27b0",
}
