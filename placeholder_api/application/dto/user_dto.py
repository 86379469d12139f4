from typing import Optional
from pydantic import BaseModel


class GeoSchema(BaseModel):
    """DTO for address coordinates"""
    lat: Optional[str] = None
    lng: Optional[str] = None


class AddressSchema(BaseModel):
    """DTO for a user's address"""
    street: Optional[str] = None
    suite: Optional[str] = None
    city: Optional[str] = None
    zipcode: Optional[str] = None
    geo: Optional[GeoSchema] = None


class CompanySchema(BaseModel):
    """DTO for a user's company"""
    name: Optional[str] = None
    catchPhrase: Optional[str] = None
    bs: Optional[str] = None


class UserCreateRequest(BaseModel):
    """
    DTO for user creation request.
    
    Every field is optional at the schema level so that missing and
    over-long values are reported by the validation rules with their own
    messages instead of a schema error.
    """
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    address: Optional[AddressSchema] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    company: Optional[CompanySchema] = None


class UserUpdateRequest(BaseModel):
    """DTO for partial user update; absent or null fields are left unchanged"""
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    address: Optional[AddressSchema] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    company: Optional[CompanySchema] = None


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: int
    name: str
    username: str
    email: str
    address: AddressSchema
    phone: str
    website: str
    company: CompanySchema
