from dataclasses import asdict, dataclass, fields


@dataclass(slots=True)
class AjustesUI:
    logo: str | None = None
    nombre_hotel: str | None = None
    color_primario: str | None = None

    @classmethod
    def claves(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "AjustesUI":
        return cls(**{k: v for k, v in data.items() if k in cls.claves()})

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)
