"""
Registro de tipos de badge.

Cada tipo es un modelo pydantic inmutable con un discriminador `badge_type`;
la unión `Badge` es cerrada: solo existen los tipos listados en `BADGE_TYPES`.
Para añadir un tipo nuevo basta con declarar su modelo y registrarlo abajo.
"""
from typing import Annotated, Any, Dict, FrozenSet, List, Literal, Mapping, Optional, Type, Union
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from pkgbadges.domain.badges.errors import MissingBadgeAttributes, UnknownBadgeType


class BaseBadge(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    badge_type: str

    def attributes(self) -> Dict[str, Optional[str]]:
        """Atributos tal como se guardan en la fila (sin el discriminador)."""
        return self.model_dump(exclude={"badge_type"})

    def to_encodable(self) -> Dict[str, Any]:
        return {"badge_type": self.badge_type, "attributes": self.attributes()}


class Appveyor(BaseBadge):
    badge_type: Literal["appveyor"] = "appveyor"
    repository: str
    branch: Optional[str] = None
    service: Optional[str] = None  # github | bitbucket | gitlab


class TravisCi(BaseBadge):
    badge_type: Literal["travis-ci"] = "travis-ci"
    repository: str
    branch: Optional[str] = None


class GitLab(BaseBadge):
    badge_type: Literal["gitlab"] = "gitlab"
    repository: str
    branch: Optional[str] = None


class CircleCi(BaseBadge):
    badge_type: Literal["circle-ci"] = "circle-ci"
    repository: str
    branch: Optional[str] = None


class Codecov(BaseBadge):
    badge_type: Literal["codecov"] = "codecov"
    repository: str
    branch: Optional[str] = None
    service: Optional[str] = None


class Coveralls(BaseBadge):
    badge_type: Literal["coveralls"] = "coveralls"
    repository: str
    branch: Optional[str] = None
    service: Optional[str] = None


class IsItMaintainedIssueResolution(BaseBadge):
    badge_type: Literal["is-it-maintained-issue-resolution"] = "is-it-maintained-issue-resolution"
    repository: str


class IsItMaintainedOpenIssues(BaseBadge):
    badge_type: Literal["is-it-maintained-open-issues"] = "is-it-maintained-open-issues"
    repository: str


Badge = Annotated[
    Union[
        Appveyor,
        TravisCi,
        GitLab,
        CircleCi,
        Codecov,
        Coveralls,
        IsItMaintainedIssueResolution,
        IsItMaintainedOpenIssues,
    ],
    Field(discriminator="badge_type"),
]

BADGE_TYPES: Dict[str, Type[BaseBadge]] = {
    "appveyor": Appveyor,
    "travis-ci": TravisCi,
    "gitlab": GitLab,
    "circle-ci": CircleCi,
    "codecov": Codecov,
    "coveralls": Coveralls,
    "is-it-maintained-issue-resolution": IsItMaintainedIssueResolution,
    "is-it-maintained-open-issues": IsItMaintainedOpenIssues,
}

_badge_adapter = TypeAdapter(Badge)


def known_badge_types() -> List[str]:
    return sorted(BADGE_TYPES)


def _lookup(badge_type: str) -> Type[BaseBadge]:
    cls = BADGE_TYPES.get(badge_type)
    if cls is None:
        raise UnknownBadgeType(badge_type)
    return cls


def required_attributes(badge_type: str) -> FrozenSet[str]:
    cls = _lookup(badge_type)
    return frozenset(
        name for name, f in cls.model_fields.items()
        if name != "badge_type" and f.is_required()
    )


def optional_attributes(badge_type: str) -> FrozenSet[str]:
    cls = _lookup(badge_type)
    return frozenset(
        name for name, f in cls.model_fields.items()
        if name != "badge_type" and not f.is_required()
    )


def build_badge(badge_type: str, attributes: Mapping[str, Optional[str]]) -> BaseBadge:
    """
    Construye el badge tipado a partir de los atributos crudos.

    - Claves que el tipo no reconoce se descartan (compatibilidad hacia adelante).
    - Si falta algún obligatorio -> MissingBadgeAttributes con todos los que faltan.
    - Tipo no registrado -> UnknownBadgeType.
    """
    cls = _lookup(badge_type)
    required = required_attributes(badge_type)
    allowed = required | optional_attributes(badge_type)

    data = {k: v for k, v in (attributes or {}).items() if k in allowed and v is not None}
    missing = required - data.keys()
    if missing:
        raise MissingBadgeAttributes(badge_type, missing)

    try:
        return cls(**data)
    except ValidationError as exc:
        # valores con tipo incorrecto (p.ej. no-string) cuentan como ausentes
        bad = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
        raise MissingBadgeAttributes(badge_type, bad or required) from exc


def badge_from_row(badge_type: str, attributes: Mapping[str, Any]) -> BaseBadge:
    """Reconstruye un badge ya guardado (lectura de `package_badges`)."""
    _lookup(badge_type)
    return _badge_adapter.validate_python({**(attributes or {}), "badge_type": badge_type})
