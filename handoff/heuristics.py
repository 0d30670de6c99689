"""Lookup tables that drive relevance scoring and description synthesis.

Every table is keyed or matched on the lower-cased element name. Curated
entries use the normalized form from :func:`normalize_name` so that
``validateEmail`` and ``validate_email`` share one record.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence, Tuple

FLAVOR_JAVASCRIPT = "javascript"
FLAVOR_PYTHON = "python"
FLAVOR_JAVA = "java"

ReturnTexts = Mapping[str, str]


def normalize_name(name: str) -> str:
    """Return the curated-table key for an element name."""
    return name.lower().replace("_", "")


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def split_name(name: str) -> str:
    """``validateEmail`` / ``validate_email`` -> ``validate email``."""
    spaced = _CAMEL_BOUNDARY.sub(" ", name).replace("_", " ")
    return " ".join(spaced.lower().split())


def _returns(javascript: str, python: str, java: str) -> Dict[str, str]:
    return {FLAVOR_JAVASCRIPT: javascript, FLAVOR_PYTHON: python, FLAVOR_JAVA: java}


@dataclass(frozen=True)
class CuratedEntry:
    """Hand-written knowledge about a well-known element name."""

    keywords: tuple[str, ...]
    extraction: Optional[re.Pattern[str]]
    description: str
    returns: ReturnTexts


def _curated(
    keywords: Sequence[str],
    extraction: Optional[str],
    description: str,
    returns: ReturnTexts,
) -> CuratedEntry:
    compiled = re.compile(extraction, re.IGNORECASE) if extraction else None
    return CuratedEntry(tuple(keywords), compiled, description, returns)


CURATED: Dict[str, CuratedEntry] = {
    "validateemail": _curated(
        ["email validation", "validate email", "email format"],
        r"email validation.*?regex pattern",
        "Validates email addresses using regex pattern",
        _returns(
            "{boolean} True if email format is valid, false otherwise",
            "bool: True if email format is valid, False otherwise",
            "boolean True if email format is valid, false otherwise",
        ),
    ),
    "hashpassword": _curated(
        ["password hash", "bcrypt", "salt rounds", "password security"],
        r"password.*?bcrypt.*?salt rounds",
        "Securely hashes passwords using bcrypt with salt rounds",
        _returns(
            "{Promise<string>} Promise resolving to bcrypt hashed password",
            "str: Bcrypt hashed password string",
            "String Bcrypt hashed password string",
        ),
    ),
    "calculatediscount": _curated(
        ["discount calculation", "percentage-based discount", "discount percent"],
        r"discount calculation.*?percentage.*?validation",
        "Calculates price discount based on percentage with validation",
        _returns(
            "{number} Final price after discount is applied",
            "float: Final price after discount is applied",
            "double Final price after discount is applied",
        ),
    ),
    "formatprice": _curated(
        ["price format", "currency format", "intl.numberformat", "usd display"],
        r"price format.*?currency.*?intl\.numberformat",
        "Formats numeric price as USD currency string",
        _returns(
            "{string} Formatted price string in USD currency format",
            "str: Formatted price string in USD currency format",
            "String Formatted price string in USD currency format",
        ),
    ),
    "generaterandomid": _curated(
        ["random string", "unique identifier", "id generation", "base36"],
        r"random.*?string.*?base36",
        "Generates random unique identifier using base36 encoding",
        _returns(
            "{string} Random alphanumeric identifier string",
            "str: Random alphanumeric identifier string",
            "String Random alphanumeric identifier string",
        ),
    ),
    "authenticatetoken": _curated(
        ["jwt token", "token verification", "authentication middleware"],
        r"jwt token.*?verification",
        "Verifies JWT authentication token",
        _returns(
            "{void} Calls next() if valid, sends 401/403 response if invalid",
            "None: Calls next function or sends error response",
            "void Calls next function or sends error response",
        ),
    ),
    "generatetoken": _curated(
        ["jwt token", "token creation", "token generation"],
        r"jwt token.*?creation",
        "Creates JWT token for user authentication",
        _returns(
            "{string} Signed JWT token string",
            "str: Signed JWT token string",
            "String Signed JWT token string",
        ),
    ),
    "loginuser": _curated(
        ["user login", "authentication", "email password"],
        r"user login.*?authentication.*?email.*?password",
        "Authenticates user credentials and returns token",
        _returns(
            "{void} Sends JSON response with token or error",
            "None: Sends JSON response with token or error",
            "void Sends JSON response with token or error",
        ),
    ),
    "registeruser": _curated(
        ["user registration", "new account", "signup"],
        r"user registration.*?new account.*?validation",
        "Creates new user account with validation and password hashing",
        _returns(
            "{void} Sends JSON response with user data and token or error",
            "None: Sends JSON response with user data and token or error",
            "void Sends JSON response with user data and token or error",
        ),
    ),
    "getallproducts": _curated(
        ["product listing", "get products", "product filter"],
        r"product listing.*?optional.*?filtering",
        "Retrieves products with optional category and price filtering",
        _returns(
            "{void} Sends JSON response with filtered products array",
            "None: Sends JSON response with filtered products array",
            "void Sends JSON response with filtered products array",
        ),
    ),
    "getproductbyid": _curated(
        ["product by id", "specific product", "find product"],
        r"product.*?by id.*?error handling",
        "Retrieves specific product by ID with error handling",
        _returns(
            "{void} Sends JSON response with product object or 404 error",
            "None: Sends JSON response with product object or 404 error",
            "void Sends JSON response with product object or 404 error",
        ),
    ),
    "createproduct": _curated(
        ["create product", "new product", "add product"],
        r"create.*?product.*?validation",
        "Creates new product with required field validation",
        _returns(
            "{void} Sends JSON response with created product or validation error",
            "None: Sends JSON response with created product or validation error",
            "void Sends JSON response with created product or validation error",
        ),
    ),
    "updateproduct": _curated(
        ["update product", "modify product", "product update"],
        r"update.*?product.*?validation",
        "Updates existing product data with validation",
        _returns(
            "{void} Sends JSON response with updated product or error",
            "None: Sends JSON response with updated product or error",
            "void Sends JSON response with updated product or error",
        ),
    ),
    "startserver": _curated(
        ["server startup", "express server", "server listen"],
        r"server.*?startup.*?express.*?port",
        "Starts Express server on specified port",
        _returns(
            "{void} Starts Express server and logs port information",
            "None: Starts server and logs port information",
            "void Starts server and logs port information",
        ),
    ),
}


def curated_entry(name: str) -> Optional[CuratedEntry]:
    return CURATED.get(normalize_name(name))


@dataclass(frozen=True)
class PrefixPatterns:
    """Keyword/score pairs searched for names starting with ``prefixes``."""

    prefixes: tuple[str, ...]
    keywords: tuple[Tuple[str, int], ...]


GENERIC_PREFIX_PATTERNS: tuple[PrefixPatterns, ...] = (
    PrefixPatterns(("get", "fetch", "retrieve"), (("retrieve", 5), ("get", 4), ("fetch", 4))),
    PrefixPatterns(("create", "add", "insert"), (("create", 5), ("add", 4), ("new", 3))),
    PrefixPatterns(("update", "modify", "change"), (("update", 5), ("modify", 4), ("change", 3))),
    PrefixPatterns(("delete", "remove"), (("delete", 5), ("remove", 4))),
    PrefixPatterns(("validate", "check"), (("validation", 5), ("validate", 4))),
    PrefixPatterns(("format", "display"), (("format", 5), ("display", 4))),
    PrefixPatterns(("generate", "create"), (("generate", 5), ("create", 4))),
    PrefixPatterns(("hash", "encrypt"), (("hash", 5), ("encrypt", 4), ("security", 3))),
    PrefixPatterns(("auth", "login"), (("authentication", 5), ("auth", 4), ("login", 3))),
    PrefixPatterns(("calculate", "compute"), (("calculate", 5), ("compute", 4))),
)


def generic_keywords(name: str) -> list[Tuple[str, int]]:
    """Return keyword/score pairs for every prefix family ``name`` belongs to."""
    lower = name.lower()
    keywords: list[Tuple[str, int]] = []
    for family in GENERIC_PREFIX_PATTERNS:
        if lower.startswith(family.prefixes):
            keywords.extend(family.keywords)
    return keywords


@dataclass(frozen=True)
class RelevanceRule:
    """Domain check applied to candidate sentences for matching names.

    The rule applies when the name contains every ``name_all`` term and, if
    given, at least one ``name_any`` term. A sentence passes when it contains
    every ``require_all`` term, at least one ``require_any`` term (if given)
    and none of ``exclude``.
    """

    name_all: tuple[str, ...]
    require_all: tuple[str, ...] = ()
    require_any: tuple[str, ...] = ()
    name_any: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    def applies(self, lower_name: str) -> bool:
        if not all(term in lower_name for term in self.name_all):
            return False
        return not self.name_any or any(term in lower_name for term in self.name_any)

    def accepts(self, lower_sentence: str) -> bool:
        if not all(term in lower_sentence for term in self.require_all):
            return False
        if self.require_any and not any(term in lower_sentence for term in self.require_any):
            return False
        return not any(phrase in lower_sentence for phrase in self.exclude)


RELEVANCE_RULES: tuple[RelevanceRule, ...] = (
    RelevanceRule(
        name_all=("validate", "email"),
        require_all=("email",),
        require_any=("valid", "format", "check", "regex"),
        exclude=("requires email, password",),
    ),
    RelevanceRule(
        name_all=("hash", "password"),
        require_all=("password",),
        require_any=("hash", "bcrypt", "security", "salt"),
        exclude=("always hash passwords, validate inputs",),
    ),
    RelevanceRule(
        name_all=("format", "price"),
        require_any=("price", "currency", "money", "format"),
        exclude=("standard format { error",),
    ),
    RelevanceRule(
        name_all=("calculate", "discount"),
        require_all=("discount",),
        require_any=("calculate", "percentage"),
        exclude=("requires authentication",),
    ),
    RelevanceRule(
        name_all=("generate",),
        name_any=("id", "random"),
        require_any=("id", "random", "generate", "unique"),
        exclude=("user id and email",),
    ),
)

# Sentences containing these never describe a single element.
IRRELEVANT_PHRASES: tuple[str, ...] = (
    "architecture decisions",
    "design principles",
    "api behaviors",
    "error responses",
    "requires authentication",
    "separation of concerns",
    "async operations",
    "all database",
    "routes, middleware",
)

# Whole contexts containing these are too broad to describe an element.
GENERIC_PHRASES: tuple[str, ...] = (
    "separation of concerns",
    "error handling",
    "product management",
    "requires authentication",
    "consistent json",
    "routes, middleware",
    "all database",
)


@dataclass(frozen=True)
class NameRule:
    """Structural description chosen from the shape of an element name."""

    terms: tuple[str, ...]
    description: str
    prefix: bool = False
    refinements: tuple[Tuple[tuple[str, ...], str], ...] = ()

    def applies(self, lower_name: str) -> bool:
        if self.prefix:
            return lower_name.startswith(self.terms)
        return any(term in lower_name for term in self.terms)

    def describe(self, lower_name: str) -> str:
        for terms, text in self.refinements:
            if any(term in lower_name for term in terms):
                return text
        return self.description


NAME_RULES: tuple[NameRule, ...] = (
    NameRule(
        ("validate",),
        "Validates input data according to specified rules",
        refinements=((("email",), "Validates email addresses using regex pattern"),),
    ),
    NameRule(
        ("hash",),
        "Hashes data for secure storage",
        refinements=((("password",), "Securely hashes passwords using bcrypt"),),
    ),
    NameRule(
        ("calculate",),
        "Calculates and returns computed value",
        refinements=((("discount",), "Calculates price discount based on percentage"),),
    ),
    NameRule(
        ("format",),
        "Formats data for display presentation",
        refinements=((("price",), "Formats numeric price as currency string"),),
    ),
    NameRule(
        ("generate",),
        "Generates new value or resource",
        refinements=(
            (("id", "random"), "Generates random unique identifier"),
            (("token",), "Generates authentication token"),
        ),
    ),
    NameRule(
        ("authenticate", "auth"),
        "Authenticates user credentials",
        refinements=((("token",), "Verifies authentication token"),),
    ),
    NameRule(("login",), "Authenticates user credentials and returns token"),
    NameRule(("register",), "Creates new user account with validation"),
    NameRule(
        ("get", "fetch"),
        "Retrieves data from storage",
        prefix=True,
        refinements=(
            (("all",), "Retrieves all items with optional filtering"),
            (("byid", "by_id"), "Retrieves specific item by ID"),
        ),
    ),
    NameRule(("create", "add"), "Creates new resource with validation", prefix=True),
    NameRule(("update", "modify"), "Updates existing resource data", prefix=True),
    NameRule(("delete", "remove"), "Deletes specified resource", prefix=True),
    NameRule(
        ("start",),
        "Starts specified service or process",
        prefix=True,
        refinements=((("server",), "Starts server on specified port"),),
    ),
)


@dataclass(frozen=True)
class KeywordHint:
    """Purpose keywords implied by a name fragment or a code marker."""

    markers: tuple[str, ...]
    keywords: tuple[str, ...]


NAME_KEYWORD_HINTS: tuple[KeywordHint, ...] = (
    KeywordHint(("validate",), ("validation", "validate", "check")),
    KeywordHint(("hash",), ("hash", "encrypt", "security")),
    KeywordHint(("calculate",), ("calculate", "compute", "math")),
    KeywordHint(("format",), ("format", "display", "string")),
    KeywordHint(("generate",), ("generate", "create", "random")),
    KeywordHint(("authenticate",), ("auth", "login", "security")),
    KeywordHint(("register",), ("register", "signup", "user")),
    KeywordHint(("get",), ("retrieve", "fetch", "get")),
    KeywordHint(("create",), ("create", "add", "new")),
    KeywordHint(("update",), ("update", "modify", "change")),
    KeywordHint(("delete",), ("delete", "remove", "destroy")),
)

CODE_KEYWORD_HINTS: tuple[KeywordHint, ...] = (
    KeywordHint(("bcrypt", "hash"), ("password", "hash", "security")),
    KeywordHint(("email", "@"), ("email", "validation")),
    KeywordHint(("jwt", "token"), ("authentication", "token", "security")),
    KeywordHint(("price", "currency"), ("price", "money", "format")),
    KeywordHint(("math.random", "random"), ("random", "generate", "id")),
)

KEYWORD_DESCRIPTIONS: Dict[str, str] = {
    "validation": "Validates input data",
    "validate": "Validates input data",
    "hash": "Hashes data for secure storage",
    "encrypt": "Encrypts data for security",
    "calculate": "Calculates and returns computed value",
    "format": "Formats data for display",
    "generate": "Generates new value",
    "authenticate": "Authenticates user credentials",
    "register": "Registers new user account",
    "retrieve": "Retrieves data from storage",
    "create": "Creates new resource",
    "update": "Updates existing resource",
    "delete": "Deletes specified resource",
}


def collect_keywords(hints: Sequence[KeywordHint], lower_text: str) -> list[str]:
    keywords: list[str] = []
    for hint in hints:
        if any(marker in lower_text for marker in hint.markers):
            keywords.extend(hint.keywords)
    return keywords


@dataclass(frozen=True)
class ReturnRule:
    """Return-value wording for names matching ``terms``."""

    terms: tuple[str, ...]
    returns: ReturnTexts
    prefix: bool = True
    refinements: tuple[Tuple[tuple[str, ...], ReturnTexts], ...] = field(default=())

    def applies(self, lower_name: str) -> bool:
        if self.prefix:
            return lower_name.startswith(self.terms)
        return any(term in lower_name for term in self.terms)

    def describe(self, lower_name: str) -> ReturnTexts:
        for terms, texts in self.refinements:
            if any(term in lower_name for term in terms):
                return texts
        return self.returns


RETURN_RULES: tuple[ReturnRule, ...] = (
    ReturnRule(
        ("validate", "check", "is"),
        _returns(
            "{boolean} True if validation passes, false otherwise",
            "bool: True if validation passes, False otherwise",
            "boolean True if validation passes, false otherwise",
        ),
    ),
    ReturnRule(
        ("get", "fetch", "find"),
        _returns(
            "{Object|null} Retrieved item or null if not found",
            "object|None: Retrieved item or None if not found",
            "Object Retrieved item or null if not found",
        ),
        refinements=(
            (
                ("all", "list"),
                _returns(
                    "{Array} Array of retrieved items",
                    "list: List of retrieved items",
                    "Array Array of retrieved items",
                ),
            ),
        ),
    ),
    ReturnRule(
        ("create", "add", "insert"),
        _returns("{Object} Created item object", "object: Created item object", "Object Created item object"),
    ),
    ReturnRule(
        ("update", "modify", "edit"),
        _returns("{Object} Updated item object", "object: Updated item object", "Object Updated item object"),
    ),
    ReturnRule(
        ("delete", "remove"),
        _returns(
            "{boolean} True if deletion successful",
            "bool: True if deletion successful",
            "boolean True if deletion successful",
        ),
    ),
    ReturnRule(
        ("calculate", "compute"),
        _returns("{number} Calculated result", "float: Calculated result", "double Calculated result"),
    ),
    ReturnRule(
        ("format", "stringify"),
        _returns("{string} Formatted string", "str: Formatted string", "String Formatted string"),
    ),
    ReturnRule(
        ("generate", "build"),
        _returns("{string} Generated value", "str: Generated value", "String Generated value"),
    ),
    ReturnRule(
        ("hash", "encrypt"),
        _returns(
            "{string} Hashed/encrypted string",
            "str: Hashed/encrypted string",
            "String Hashed/encrypted string",
        ),
        prefix=False,
    ),
    ReturnRule(
        ("middleware", "auth", "handler"),
        _returns(
            "{void} Middleware function with side effects",
            "None: Function with side effects",
            "void Function with side effects",
        ),
        prefix=False,
    ),
    ReturnRule(
        ("start", "init", "setup"),
        _returns(
            "{void} Initializes and starts service",
            "None: Initializes and starts service",
            "void Initializes and starts service",
        ),
        prefix=False,
    ),
)

DEFAULT_RETURNS: ReturnTexts = _returns(
    "{*} Function return value",
    "Return value of the function",
    "Function return value",
)


__all__ = [
    "CODE_KEYWORD_HINTS",
    "CURATED",
    "CuratedEntry",
    "DEFAULT_RETURNS",
    "FLAVOR_JAVA",
    "FLAVOR_JAVASCRIPT",
    "FLAVOR_PYTHON",
    "GENERIC_PHRASES",
    "GENERIC_PREFIX_PATTERNS",
    "IRRELEVANT_PHRASES",
    "KEYWORD_DESCRIPTIONS",
    "NAME_KEYWORD_HINTS",
    "NAME_RULES",
    "RELEVANCE_RULES",
    "RETURN_RULES",
    "RelevanceRule",
    "ReturnRule",
    "collect_keywords",
    "curated_entry",
    "generic_keywords",
    "normalize_name",
    "split_name",
]
