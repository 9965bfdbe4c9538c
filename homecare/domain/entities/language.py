from enum import Enum


class Language(str, Enum):
    EN = "en"
    TA = "ta"

    def toggled(self) -> "Language":
        return Language.TA if self is Language.EN else Language.EN
