"""Shared constants: sentinels and asset URL templates."""

from __future__ import annotations

NOT_AVAILABLE = "N/A"
UNKNOWN_COUNTRY = "UN"

_F1_MEDIA = "https://media.formula1.com"

FLAG_URL = "https://flagsapi.com/{country_code}/flat/64.png"
SHINY_FLAG_URL = "https://flagsapi.com/{country_code}/shiny/64.png"

HELMET_IMAGE_URL = (
    f"{_F1_MEDIA}/image/upload/f_auto,c_limit,q_75,w_1024"
    "/content/dam/fom-website/manual/Helmets2024/{family_name}"
)
NUMBER_IMAGE_URL = (
    f"{_F1_MEDIA}/d_default_fallback_image.png/content/dam/fom-website"
    "/2018-redesign-assets/drivers/number-logos/{name_code}01.png"
)
PROFILE_IMAGE_URL = (
    f"{_F1_MEDIA}/d_driver_fallback_image.png/content/dam/fom-website/drivers"
    "/{initial}/{name_code}01_{given_name}_{family_name}/{name_code}01.png"
)
DRIVER_IMAGE_URL = (
    f"{_F1_MEDIA}/image/upload/f_auto,c_limit,q_auto,w_1320"
    "/content/dam/fom-website/drivers/2024Drivers/{family_name}"
)
# Some driver images are published outside the content/dam tree
DRIVER_IMAGE_URL_NO_DAM = (
    f"{_F1_MEDIA}/image/upload/f_auto,c_limit,q_auto,w_1320"
    "/fom-website/drivers/2024Drivers/{family_name}"
)

CIRCUIT_IMAGE_URL = (
    f"{_F1_MEDIA}/image/upload/f_auto,c_limit,w_1440,q_auto/f_auto/q_auto"
    "/content/dam/fom-website/2018-redesign-assets/Racehub%20header%20images%2016x9/{place}"
)
TEAM_LOGO_URL = (
    f"{_F1_MEDIA}/image/upload/f_auto,c_limit,q_75,w_1320"
    "/content/dam/fom-website/2018-redesign-assets/team%20logos/{team}"
)
