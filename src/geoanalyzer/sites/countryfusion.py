"""CountryFusion.net site configuration.

Priority rules and URL patterns for countryfusion.net.

SEO/AEO focus:
- Blog posts targeting Nashville + dance keywords
- Certification pages (high conversion intent)
- Core service pages (bachelorette, classes, etc.)
- Skip product variants and low-value pages

Rules are checked in order and the first match wins, so the exclusion
rules at the bottom only see URLs no earlier rule claimed.
"""

import re

from geoanalyzer.core.constants import UrlCategory
from geoanalyzer.core.models import PatternMatch, SiteConfig, UrlPattern
from geoanalyzer.classifier.matcher import has_duplicate_trailing_slash


CORE = UrlCategory.CORE
BLOG = UrlCategory.BLOG
PRODUCT = UrlCategory.PRODUCT
CERTIFICATION = UrlCategory.CERTIFICATION
CATEGORY = UrlCategory.CATEGORY
INFO = UrlCategory.INFO
TRUST = UrlCategory.TRUST
LEGAL = UrlCategory.LEGAL
UTILITY = UrlCategory.UTILITY
VARIANT = UrlCategory.VARIANT


def _include(match: PatternMatch, priority: int, category: UrlCategory) -> UrlPattern:
    return UrlPattern(match, priority, category)


def _skip(match: PatternMatch, category: UrlCategory, reason: str) -> UrlPattern:
    return UrlPattern(match, 10, category, include=False, reason=reason)


PATTERNS = (
    # === PRIORITY 1: Homepage ===
    _include(re.compile(r"^/?$"), 1, CORE),

    # === PRIORITY 2: Core Certification Landing ===
    _include("/certification", 2, CERTIFICATION),
    _include("/instructor-certification", 2, CERTIFICATION),

    # === PRIORITY 3: High-Value Certification Pages ===
    _include("/online-instructor-certification", 3, CERTIFICATION),
    _include("/aquatic-instructor-certification", 3, CERTIFICATION),
    _include("/online-kids-instructor-certification", 3, CERTIFICATION),
    _include("/two-step-certification", 3, CERTIFICATION),
    _include("/strut-instructor-certification", 3, CERTIFICATION),

    # === PRIORITY 3: Core Service Pages ===
    _include("/what-is-country-fusion", 3, INFO),
    _include("/country-fusion-faq", 3, INFO),
    _include("/country-fusion-for-kids", 3, INFO),
    _include("/lifestyle", 3, INFO),
    _include("/nashville-headquarters", 3, TRUST),
    _include("/classes", 3, CORE),
    _include("/events", 3, INFO),
    _include("/testimonials", 3, TRUST),
    _include("/bachelorette-parties", 3, CORE),
    _include("/wedding", 3, CORE),

    # === PRIORITY 4: Live Trainings & Exam ===
    _include("/live-trainings", 4, CERTIFICATION),
    _include("/certification-exam", 4, CERTIFICATION),
    _include("/strut-certification-exam", 4, CERTIFICATION),
    _include("/two-step-certification-exam", 4, CERTIFICATION),
    _include("/aqua-fusion-certification-exam", 4, CERTIFICATION),
    _include("/kids-certification-exam", 4, CERTIFICATION),

    # === PRIORITY 4: Nashville/Location Blog Posts ===
    _include("/best-dance-studios-in-nashville", 4, BLOG),
    _include("/the-ultimate-bachelorette-party-experience-in-nashville", 4, BLOG),
    _include(re.compile(r"turn-your-passion-for-dance-into-career.*nashville"), 4, BLOG),
    _include("/cma-fest-2025-in-nashville", 4, BLOG),
    _include("/top-things-to-do-in-nashville", 4, BLOG),
    _include("/where-to-take-two-step-dance-lessons-in-nashville", 4, BLOG),

    # === PRIORITY 5: Other High-Value Blog Posts ===
    _include("/new-two-step-certification", 5, BLOG),
    _include("/make-a-splash-get-certified-as-a-country-fusion-aquatics-instructor", 5, BLOG),
    _include("/from-new-york-to-nashville-elizabeth-mooneys-country-fusion-journey", 5, BLOG),
    _include("/step-into-success-mastering-line-dance-fitness-instruction", 5, BLOG),
    _include("/begin-your-line-dancing-journey", 5, BLOG),
    _include("/get-your-boots-tapping-a-beginners-guide-to-country-swing-dancing", 5, BLOG),
    _include("/country-line-dancing-for-fitness", 5, BLOG),
    _include("/who-is-dance-therapy-for", 5, BLOG),
    _include("/why-bachelorette-pole-dance-parties-are-the-ultimate-girls-night-out", 5, BLOG),
    _include("/bachelorette-line-dancing", 5, BLOG),
    _include("/why-bachelorettes-love-countryfusion", 5, BLOG),
    _include("/become-a-certified-country-fusion-instructor", 5, BLOG),

    # === PRIORITY 6: Product Categories (navigation only) ===
    _include("/product-category/apparel", 6, CATEGORY),
    _include("/product-category/certifications", 6, CATEGORY),
    _include("/product-category/classes", 6, CATEGORY),
    _include("/product-category/subscriptions", 6, CATEGORY),
    _include("/product-category/instructor-subscriptions", 6, CATEGORY),

    # === PRIORITY 7: Key Individual Product Pages ===
    _include("/product/online-instructor-certification", 7, PRODUCT),
    _include("/product/instructor-certification-bundle", 7, PRODUCT),
    _include("/product/two-step-and-country-swing-instructor-certification", 7, PRODUCT),
    _include("/product/aquatics-instructor-certification", 7, PRODUCT),
    _include("/product/kids-instructor-certification", 7, PRODUCT),
    _include("/product/instructor-all-access-membership", 7, PRODUCT),
    _include("/product/line-dance-fitness-tutorials-subscription", 7, PRODUCT),
    _include("/product/country-fusion", 7, PRODUCT),

    # === SKIP: Product Variants (colors, sizes) ===
    _skip(
        re.compile(r"product.*(tank|hoodie|sweatshirt|sweatpants|flannel|hat|cap|mask|bandana|jacket|crop)"),
        VARIANT,
        "Product variant (color/size)",
    ),
    _skip(
        re.compile(r"product.*(gray|black|pink|peach|white|green|yellow|camo|blue|red|purple|logo)", re.IGNORECASE),
        VARIANT,
        "Product variant (color)",
    ),
    _skip(
        re.compile(r"product.*(freedom|honky-tonk|outlaw|line-dance-queen)", re.IGNORECASE),
        VARIANT,
        "Product variant (style)",
    ),

    # === SKIP: Low-value product pages ===
    _skip("/product/pt5", PRODUCT, "Low value product"),
    _skip("/product/single-class", PRODUCT, "Single class product"),
    _skip("/product/single-session-booking", PRODUCT, "Single session"),
    _skip("/product/single-zoom-class", PRODUCT, "Single zoom class"),

    # === SKIP: Member/restricted pages ===
    _skip("/instructor-video-access", UTILITY, "Member-only content"),
    _skip("/membership-kids-instructor-video-access", UTILITY, "Member-only content"),
    _skip("/line-dance-tutorials", UTILITY, "Member-only content"),
    _skip("/content-restricted", UTILITY, "Restricted content"),
    _skip("/under-construction", UTILITY, "Under construction"),
    _skip("/its-a-pool-party", UTILITY, "Redirect/low value"),

    # === SKIP: Legal/Utility ===
    _skip("/refund-policy", LEGAL, "Legal page"),
    _skip("/dvds", UTILITY, "Outdated content"),

    # === SKIP: Duplicate trailing slash ===
    _skip(has_duplicate_trailing_slash, UTILITY, "Duplicate trailing slash"),
)


_BASE = "https://countryfusion.net"

# Manually curated priority URLs, for automated crawling or manual verification
COUNTRYFUSION_PRIORITY_URLS = tuple(f"{_BASE}{path}" for path in (
    # Core
    "/",

    # Certifications
    "/certification",
    "/instructor-certification",
    "/online-instructor-certification",
    "/aquatic-instructor-certification",
    "/online-kids-instructor-certification",
    "/two-step-certification",
    "/strut-instructor-certification",
    "/live-trainings",
    "/certification-exam",

    # Core Pages
    "/what-is-country-fusion",
    "/country-fusion-faq",
    "/country-fusion-for-kids",
    "/lifestyle",
    "/nashville-headquarters",
    "/classes",
    "/events",
    "/testimonials",
    "/bachelorette-parties",
    "/wedding",

    # Nashville/Location Blog Posts
    "/best-dance-studios-in-nashville",
    "/the-ultimate-bachelorette-party-experience-in-nashville",
    "/turn-your-passion-for-dance-into-career-become-a-certified-line-dance-instructor-in-nashville",
    "/cma-fest-2025-in-nashville-celebrate-country-music-line-dancing",
    "/top-things-to-do-in-nashville",
    "/where-to-take-two-step-dance-lessons-in-nashville",

    # Other Blog Posts
    "/new-two-step-certification",
    "/make-a-splash-get-certified-as-a-country-fusion-aquatics-instructor",
    "/from-new-york-to-nashville-elizabeth-mooneys-country-fusion-journey",
    "/step-into-success-mastering-line-dance-fitness-instruction",
    "/begin-your-line-dancing-journey",
    "/get-your-boots-tapping-a-beginners-guide-to-country-swing-dancing",
    "/country-line-dancing-for-fitness",
    "/who-is-dance-therapy-for",
    "/why-bachelorette-pole-dance-parties-are-the-ultimate-girls-night-out",
    "/bachelorette-line-dancing",
    "/why-bachelorettes-love-countryfusion",
    "/become-a-certified-country-fusion-instructor",

    # Product Categories
    "/product-category/apparel",
    "/product-category/certifications",
    "/product-category/classes",
    "/product-category/subscriptions",
    "/product-category/instructor-subscriptions",

    # Key Products
    "/product/online-instructor-certification",
    "/product/instructor-certification-bundle",
    "/product/two-step-and-country-swing-instructor-certification",
    "/product/aquatics-instructor-certification",
    "/product/kids-instructor-certification",
    "/product/instructor-all-access-membership",
    "/product/line-dance-fitness-tutorials-subscription",
    "/product/country-fusion",
))


COUNTRYFUSION_CONFIG = SiteConfig(
    domain="countryfusion.net",
    base_url=_BASE,
    patterns=PATTERNS,
    priority_urls=COUNTRYFUSION_PRIORITY_URLS,
    name="countryfusion",
)
