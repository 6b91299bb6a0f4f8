# pricecase/services/i18n.py
# -----------------------------------------------------------------------------
# Locale-keyed string table used by the HTTP layer
# - lookup(locale, key) falls back to FALLBACK_LOCALE, then to the key itself
# -----------------------------------------------------------------------------
from pricecase.core.config import settings

STRINGS: dict[str, dict[str, str]] = {
    "it": {
        "linkNotFound": "Link non valido o scaduto",
        "linkExpiredMessage": "Il link che stai cercando di accedere non è valido o è scaduto.",
        "shareFailed": "Impossibile generare il link",
        "shareFailedMessage": "Il link non è stato salvato. Riprova più tardi.",
        "duplicatedCombo": "Combo duplicata - modificabile",
        "revenueSuggestion": "Con questa configurazione puoi generare un extra fatturato netto di",
        "revenueSuggestionEnd": "all'anno rispetto al tuo scenario attuale.",
        "paybackEstimated": "Payback stimato",
        "monthsToRecoverInvestment": "mesi per recuperare l'investimento",
        "scenarioLimit": "Puoi avere al massimo {limit} copie dello scenario.",
    },
    "en": {
        "linkNotFound": "Invalid or expired link",
        "linkExpiredMessage": "The link you are trying to access is not valid or has expired.",
        "shareFailed": "Could not generate the link",
        "shareFailedMessage": "The link was not saved. Please try again later.",
        "duplicatedCombo": "Duplicated combo - editable",
        "revenueSuggestion": "With this configuration you can generate an extra net revenue of",
        "revenueSuggestionEnd": "per year compared to your current scenario.",
        "paybackEstimated": "Estimated payback",
        "monthsToRecoverInvestment": "months to recover the investment",
        "scenarioLimit": "You can keep at most {limit} scenario copies.",
    },
    "es": {
        "linkNotFound": "Enlace inválido o expirado",
        "linkExpiredMessage": "El enlace al que intentas acceder no es válido o ha expirado.",
        "shareFailed": "No se pudo generar el enlace",
        "shareFailedMessage": "El enlace no se ha guardado. Inténtalo más tarde.",
        "duplicatedCombo": "Combo duplicado - editable",
        "revenueSuggestion": "Con esta configuración puedes generar ingresos netos adicionales de",
        "revenueSuggestionEnd": "al año en comparación con tu escenario actual.",
        "paybackEstimated": "Payback estimado",
        "monthsToRecoverInvestment": "meses para recuperar la inversión",
    },
    "fr": {
        "linkNotFound": "Lien invalide ou expiré",
        "linkExpiredMessage": "Le lien auquel vous essayez d'accéder n'est pas valide ou a expiré.",
        "shareFailed": "Impossible de générer le lien",
        "shareFailedMessage": "Le lien n'a pas été enregistré. Réessayez plus tard.",
        "duplicatedCombo": "Combo dupliqué - modifiable",
        "revenueSuggestion": "Avec cette configuration, vous pouvez générer un chiffre d'affaires net supplémentaire de",
        "revenueSuggestionEnd": "par an par rapport à votre scénario actuel.",
        "paybackEstimated": "Payback estimé",
        "monthsToRecoverInvestment": "mois pour récupérer l'investissement",
    },
}


def lookup(locale: str | None, key: str) -> str:
    table = STRINGS.get(locale or settings.DEFAULT_LOCALE, {})
    if key in table:
        return table[key]
    return STRINGS.get(settings.FALLBACK_LOCALE, {}).get(key, key)


def format_currency(value: float) -> str:
    """EUR amount without decimals, dot as thousands separator (it-IT style)."""
    return "€" + f"{round(value):,}".replace(",", ".")
