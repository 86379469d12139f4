from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Geo:
    """Geographic coordinates of an address"""
    lat: Optional[str] = None
    lng: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Geo":
        data = data if isinstance(data, dict) else {}
        return cls(lat=_as_text(data.get("lat")), lng=_as_text(data.get("lng")))

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in (("lat", self.lat), ("lng", self.lng)) if value is not None}


@dataclass
class Address:
    """Postal address nested inside a user"""
    street: Optional[str] = None
    suite: Optional[str] = None
    city: Optional[str] = None
    zipcode: Optional[str] = None
    geo: Optional[Geo] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Address":
        data = data if isinstance(data, dict) else {}
        return cls(
            street=_as_text(data.get("street")),
            suite=_as_text(data.get("suite")),
            city=_as_text(data.get("city")),
            zipcode=_as_text(data.get("zipcode")),
            geo=Geo.from_dict(data["geo"]) if isinstance(data.get("geo"), dict) else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key in ("street", "suite", "city", "zipcode"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.geo is not None:
            result["geo"] = self.geo.to_dict()
        return result


@dataclass
class Company:
    """Employer details nested inside a user"""
    name: Optional[str] = None
    catch_phrase: Optional[str] = None
    bs: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Company":
        data = data if isinstance(data, dict) else {}
        return cls(
            name=_as_text(data.get("name")),
            catch_phrase=_as_text(data.get("catchPhrase")),
            bs=_as_text(data.get("bs")),
        )

    def to_dict(self) -> Dict[str, Any]:
        pairs = (("name", self.name), ("catchPhrase", self.catch_phrase), ("bs", self.bs))
        return {key: value for key, value in pairs if value is not None}


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[int]
    name: str
    username: str
    email: str
    hashed_password: str
    address: Address = field(default_factory=Address)
    phone: str = ""
    website: str = ""
    company: Company = field(default_factory=Company)

    def __post_init__(self):
        """Business validations"""
        if not self.hashed_password:
            raise ValueError("Password hash is required")


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
