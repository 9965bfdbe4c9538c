from enum import Enum


class Role(str, Enum):
    PATIENT = "patient"
    NURSE = "nurse"

    @staticmethod
    def parse(value: "str | Role") -> "Role":
        if isinstance(value, Role):
            return value
        normalized = str(value or "").strip().lower()
        for role in Role:
            if role.value == normalized:
                return role
        raise ValueError(f"Unknown role: {value!r}")

    def label(self) -> str:
        if self is Role.PATIENT:
            return "Patient"
        if self is Role.NURSE:
            return "Nurse"
        raise ValueError(f"Unhandled role: {self!r}")
