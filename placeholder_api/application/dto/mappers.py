"""
Mapping between domain models and API DTOs.

Outward user representations never carry the password hash; the response
DTOs have no field for it.
"""
from typing import Optional

from ...domain.models.user import User, Address, Geo, Company
from ...domain.models.post import Post
from .user_dto import AddressSchema, CompanySchema, GeoSchema, UserResponse
from .post_dto import PostResponse


def address_from_schema(schema: Optional[AddressSchema]) -> Address:
    if schema is None:
        return Address()
    geo = None
    if schema.geo is not None:
        geo = Geo(lat=schema.geo.lat, lng=schema.geo.lng)
    return Address(
        street=schema.street,
        suite=schema.suite,
        city=schema.city,
        zipcode=schema.zipcode,
        geo=geo,
    )


def company_from_schema(schema: Optional[CompanySchema]) -> Company:
    if schema is None:
        return Company()
    return Company(name=schema.name, catch_phrase=schema.catchPhrase, bs=schema.bs)


def to_user_response(user: Optional[User]) -> Optional[UserResponse]:
    """Domain user to API user; None in, None out"""
    if user is None:
        return None
    
    address = user.address
    company = user.company
    return UserResponse(
        id=user.id,
        name=user.name,
        username=user.username,
        email=user.email,
        address=AddressSchema(
            street=address.street,
            suite=address.suite,
            city=address.city,
            zipcode=address.zipcode,
            geo=GeoSchema(lat=address.geo.lat, lng=address.geo.lng) if address.geo else None,
        ),
        phone=user.phone,
        website=user.website,
        company=CompanySchema(
            name=company.name,
            catchPhrase=company.catch_phrase,
            bs=company.bs,
        ),
    )


def to_post_response(post: Post) -> PostResponse:
    """Domain post (loaded with its owner) to API post"""
    if post.user is None:
        raise ValueError(f"Post {post.id} was loaded without its owner")
    
    return PostResponse(
        id=post.id,
        userId=post.user_id,
        title=post.title,
        body=post.body,
        user=to_user_response(post.user),
    )
