from typing import Dict, Optional

from pydantic import BaseModel, Field


class PopupTexts(BaseModel):
    """Schema for one language's popup texts."""

    title: str = ""
    description: str = ""


class PopupSettings(BaseModel):
    """Schema for the promotional popup settings stored under ``key = 'popup'``."""

    enabled: bool = False
    delay: int = Field(default=3000, ge=0, description="Delay before showing, in ms")
    background_image: str = ""
    translations: Dict[str, PopupTexts] = Field(default_factory=dict)
    app_store_url: str = "https://apps.apple.com/app/kudosim"
    play_store_url: str = "https://play.google.com/store/apps/details?id=com.kudosim"

    def texts_for(self, language: str, fallback: str = "en") -> Optional[PopupTexts]:
        return self.translations.get(language) or self.translations.get(fallback)


DEFAULT_POPUP_SETTINGS = PopupSettings(
    translations={
        "en": PopupTexts(
            title="Get 1GB Free Internet!",
            description="Download our app now and enjoy 1GB of free data.",
        ),
        "sq": PopupTexts(
            title="Merrni 1GB Internet Falas!",
            description="Shkarkoni aplikacionin tonë tani dhe shijoni 1GB të dhëna falas.",
        ),
        "fr": PopupTexts(
            title="Obtenez 1GB d'Internet Gratuit!",
            description="Téléchargez notre application maintenant et profitez de 1GB de données gratuites.",
        ),
        "de": PopupTexts(
            title="Erhalte 1GB kostenloses Internet!",
            description="Lade jetzt unsere App herunter und genieße 1GB kostenlose Daten.",
        ),
        "tr": PopupTexts(
            title="1GB Ücretsiz İnternet Alın!",
            description="Şimdi uygulamamızı indirin ve 1GB ücretsiz veri keyfini çıkarın.",
        ),
    }
)
