"""
Column Type Catalogue

This module is the single source of truth for which column types exist. Every
supported type name is a member of ``ColumnKind``; ``CATALOGUE`` binds each
kind to a ``ColumnStrategy`` describing its family, how it reads its
parameters, and how it samples a chunk of values. ``TypeRegistry`` resolves
type names against the catalogue, honouring the set of enabled type families.
"""

from __future__ import annotations

import logging
import math
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd
from faker import Faker

from fakeframe.python_libs.common.argument_resolver import ArgumentResolver
from fakeframe.python_libs.common.constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_LOCALE,
    LICENCE_PLATE_LOCALE,
    MAX_SMALL_UINT,
    ArgumentProfile,
    TypeFamily,
)
from fakeframe.python_libs.common.exceptions import (
    ErrorContext,
    InvalidArgumentValueError,
    UnsupportedTypeError,
)
from fakeframe.python_libs.python.random_sources import ChunkRandomSources

if TYPE_CHECKING:
    from fakeframe.python_libs.python.worker_pool import WorkerPool

logger = logging.getLogger(__name__)


class ColumnKind(StrEnum):
    """Every supported column type name."""

    U32 = "u32"
    U64 = "u64"
    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"
    BOOLEAN = "Boolean"
    WORD = "Word"
    SENTENCE = "Sentence"
    PARAGRAPH = "Paragraph"
    FIRST_NAME = "FirstName"
    LAST_NAME = "LastName"
    TITLE = "Title"
    SUFFIX = "Suffix"
    NAME = "Name"
    NAME_WITH_TITLE = "NameWithTitle"
    SENIORITY = "Seniority"
    FIELD = "Field"
    POSITION = "Position"
    JOB_TITLE = "JobTitle"
    DIGIT = "Digit"
    NUMBER_WITH_FORMAT = "NumberWithFormat"
    FREE_EMAIL_PROVIDER = "FreeEmailProvider"
    DOMAIN_SUFFIX = "DomainSuffix"
    FREE_EMAIL = "FreeEmail"
    SAFE_EMAIL = "SafeEmail"
    USERNAME = "Username"
    PASSWORD = "Password"
    IPV4 = "IPv4"
    IPV6 = "IPv6"
    IP = "IP"
    MAC_ADDRESS = "MACAddress"
    USER_AGENT = "UserAgent"
    RFC_STATUS_CODE = "RfcStatusCode"
    VALID_STATUS_CODE = "ValidStatusCode"
    HEX_COLOR = "HexColor"
    RGB_COLOR = "RgbColor"
    RGBA_COLOR = "RgbaColor"
    HSL_COLOR = "HslColor"
    HSLA_COLOR = "HslaColor"
    COLOR = "Color"
    COMPANY_SUFFIX = "CompanySuffix"
    COMPANY_NAME = "CompanyName"
    BUZZWORD = "Buzzword"
    BUZZWORD_MIDDLE = "BuzzwordMiddle"
    BUZZWORD_TAIL = "BuzzwordTail"
    CATCH_PHRASE = "CatchPhrase"
    BS_VERB = "BsVerb"
    BS_ADJ = "BsAdj"
    BS_NOUN = "BsNoun"
    BS = "Bs"
    PROFESSION = "Profession"
    INDUSTRY = "Industry"
    CITY_PREFIX = "CityPrefix"
    CITY_SUFFIX = "CitySuffix"
    CITY_NAME = "CityName"
    COUNTRY_NAME = "CountryName"
    COUNTRY_CODE = "CountryCode"
    STREET_SUFFIX = "StreetSuffix"
    STREET_NAME = "StreetName"
    TIME_ZONE = "TimeZone"
    STATE_NAME = "StateName"
    STATE_ABBR = "StateAbbr"
    SECONDARY_ADDRESS_TYPE = "SecondaryAddressType"
    SECONDARY_ADDRESS = "SecondaryAddress"
    ZIP_CODE = "ZipCode"
    POST_CODE = "PostCode"
    BUILDING_NUMBER = "BuildingNumber"
    LATITUDE = "Latitude"
    LONGITUDE = "Longitude"
    GEOHASH = "Geohash"
    LICENCE_PLATE = "LicencePlate"
    ISBN = "Isbn"
    ISBN13 = "Isbn13"
    ISBN10 = "Isbn10"
    PHONE_NUMBER = "PhoneNumber"
    CELL_NUMBER = "CellNumber"
    TIME = "Time"
    DATE = "Date"
    DATE_TIME = "DateTime"
    DURATION = "Duration"
    DATE_TIME_BEFORE = "DateTimeBefore"
    DATE_TIME_AFTER = "DateTimeAfter"
    DATE_TIME_BETWEEN = "DateTimeBetween"
    FILE_PATH = "FilePath"
    FILE_NAME = "FileName"
    FILE_EXTENSION = "FileExtension"
    DIR_PATH = "DirPath"
    BIC = "Bic"
    UUID_V1 = "UUIDv1"
    UUID_V3 = "UUIDv3"
    UUID_V4 = "UUIDv4"
    UUID_V5 = "UUIDv5"
    CURRENCY_CODE = "CurrencyCode"
    CURRENCY_NAME = "CurrencyName"
    CURRENCY_SYMBOL = "CurrencySymbol"
    CREDIT_CARD_NUMBER = "CreditCardNumber"
    DECIMAL = "Decimal"
    POSITIVE_DECIMAL = "PositiveDecimal"
    NEGATIVE_DECIMAL = "NegativeDecimal"
    NO_DECIMAL_POINTS = "NoDecimalPoints"
    BIG_DECIMAL = "BigDecimal"
    POSITIVE_BIG_DECIMAL = "PositiveBigDecimal"
    NEGATIVE_BIG_DECIMAL = "NegativeBigDecimal"
    NO_BIG_DECIMAL_POINTS = "NoBigDecimalPoints"


# =============================================================================
# Parameter structs
# =============================================================================


@dataclass(frozen=True)
class NoParams:
    pass


@dataclass(frozen=True)
class RangeParams:
    start: Any
    end: Any


@dataclass(frozen=True)
class RatioParams:
    """True with probability ``ratio / 255``."""

    ratio: int


@dataclass(frozen=True)
class FormatParams:
    fmt: str


@dataclass(frozen=True)
class PrecisionParams:
    precision: int


@dataclass(frozen=True)
class TimestampParams:
    moment: datetime


@dataclass(frozen=True)
class TimestampRangeParams:
    start: datetime
    end: datetime


NO_PARAMS = NoParams()

# Defaults applied when a range bound is absent
FLOAT_RANGE = (0.0, 1.0)
SENTENCE_WORD_RANGE = (3, 10)
PARAGRAPH_SENTENCE_RANGE = (3, 7)
PASSWORD_LENGTH_RANGE = (8, 20)

# Sampling window for DateTimeBefore / DateTimeAfter
DATETIME_OFFSET_WINDOW = timedelta(days=365 * 30)

DECIMAL_DIGITS = (8, 4)
BIG_DECIMAL_DIGITS = (30, 10)

UTC_MIN = datetime.min.replace(tzinfo=timezone.utc)
UTC_MAX = datetime.max.replace(tzinfo=timezone.utc)


Resolver = Callable[[ArgumentResolver], Any]
Sampler = Callable[[ChunkRandomSources, Any, int], Sequence[Any]]


@dataclass(frozen=True)
class ColumnStrategy:
    """
    Generation strategy bound to one column kind.

    Attributes:
        family: type family the kind belongs to
        profile: shape of the arguments the kind reads
        resolve: turns an ``ArgumentResolver`` into the kind's parameter struct
        sample: draws ``size`` values for one chunk
        dtype: numpy dtype of the output column, ``None`` for strings
    """

    family: TypeFamily
    profile: ArgumentProfile
    resolve: Resolver
    sample: Sampler
    dtype: Optional[str] = None


# =============================================================================
# Strategy builders
# =============================================================================


def _no_params(resolver: ArgumentResolver) -> NoParams:
    return NO_PARAMS


def _text(
    produce: Callable[[Faker], Any],
    family: TypeFamily = TypeFamily.CORE,
    locale: str = DEFAULT_LOCALE,
) -> ColumnStrategy:
    def sample(sources: ChunkRandomSources, params: NoParams, size: int) -> List[str]:
        fake = sources.faker(locale)
        return [str(produce(fake)) for _ in range(size)]

    return ColumnStrategy(family, ArgumentProfile.NONE, _no_params, sample)


def _text_with_params(
    profile: ArgumentProfile,
    resolve: Resolver,
    produce: Callable[[Faker, Any], Any],
    family: TypeFamily = TypeFamily.CORE,
) -> ColumnStrategy:
    def sample(sources: ChunkRandomSources, params: Any, size: int) -> List[str]:
        fake = sources.faker()
        return [str(produce(fake, params)) for _ in range(size)]

    return ColumnStrategy(family, profile, resolve, sample)


def _integer_range(dtype: str) -> ColumnStrategy:
    info = np.iinfo(dtype)
    default_start, default_end = int(info.min), int(info.max)

    def resolve(resolver: ArgumentResolver) -> RangeParams:
        return RangeParams(*resolver.get_range(dtype, default_start, default_end))

    def sample(sources: ChunkRandomSources, params: RangeParams, size: int) -> np.ndarray:
        return sources.rng.integers(params.start, params.end, size=size, endpoint=True, dtype=dtype)

    return ColumnStrategy(TypeFamily.CORE, ArgumentProfile.RANGE, resolve, sample, dtype)


def _float_range(dtype: str) -> ColumnStrategy:
    """
    Uniform floats over ``[start, end]``.

    Sampling is half-open at ``end``; the closed upper bound is still valid
    output but is drawn with probability zero except when ``start == end``.
    """

    def resolve(resolver: ArgumentResolver) -> RangeParams:
        start, end = resolver.get_range(dtype, *FLOAT_RANGE)
        if not math.isfinite(end - start):
            raise InvalidArgumentValueError(
                f"Range width {start}..{end} overflows {dtype}",
                ErrorContext(column_name=resolver.column_name, argument="range"),
            )
        return RangeParams(start, end)

    def sample(sources: ChunkRandomSources, params: RangeParams, size: int) -> np.ndarray:
        return sources.rng.uniform(params.start, params.end, size=size).astype(dtype)

    return ColumnStrategy(TypeFamily.CORE, ArgumentProfile.RANGE, resolve, sample, dtype)


def _boolean() -> ColumnStrategy:
    def resolve(resolver: ArgumentResolver) -> RatioParams:
        return RatioParams(resolver.get_small_uint("ratio"))

    def sample(sources: ChunkRandomSources, params: RatioParams, size: int) -> np.ndarray:
        return sources.rng.random(size) < params.ratio / MAX_SMALL_UINT

    return ColumnStrategy(TypeFamily.CORE, ArgumentProfile.SCALAR, resolve, sample, "bool")


def _count_range(default_range: tuple) -> Resolver:
    def resolve(resolver: ArgumentResolver) -> RangeParams:
        return RangeParams(*resolver.get_range("uint32", *default_range))

    return resolve


def _format_param(resolver: ArgumentResolver) -> FormatParams:
    return FormatParams(resolver.get_string("fmt"))


def _precision_param(resolver: ArgumentResolver) -> PrecisionParams:
    return PrecisionParams(resolver.get_small_uint("precision"))


def _timestamp_param(resolver: ArgumentResolver) -> TimestampParams:
    return TimestampParams(resolver.get_timestamp("dt"))


def _timestamp_range_param(resolver: ArgumentResolver) -> TimestampRangeParams:
    return TimestampRangeParams(*resolver.get_timestamp_range())


def _shift(moment: datetime, delta: timedelta) -> datetime:
    try:
        return moment + delta
    except OverflowError:
        return UTC_MAX if delta > timedelta(0) else UTC_MIN


def _password(fake: Faker, length: int) -> str:
    if length == 0:
        return ""
    # Faker needs room for one character of each required class
    all_classes = length >= 4
    return fake.password(
        length=length,
        special_chars=all_classes,
        digits=all_classes,
        upper_case=all_classes,
        lower_case=True,
    )


def _random_uuid(fake: Faker, version: int) -> str:
    return str(uuid.UUID(int=fake.random.getrandbits(128), version=version))


def _decimal(family: TypeFamily, digits: tuple, positive: Optional[bool], no_points: bool = False) -> ColumnStrategy:
    left_digits, right_digits = digits
    right_digits = 0 if no_points else right_digits
    # Fixed-point notation, never exponent form
    return _text(
        lambda fake: format(fake.decimal_number(left_digits, right_digits, positive), "f"),
        family=family,
    )


# =============================================================================
# Catalogue
# =============================================================================

CATALOGUE: Dict[ColumnKind, ColumnStrategy] = {
    ColumnKind.U32: _integer_range("uint32"),
    ColumnKind.U64: _integer_range("uint64"),
    ColumnKind.I32: _integer_range("int32"),
    ColumnKind.I64: _integer_range("int64"),
    ColumnKind.F32: _float_range("float32"),
    ColumnKind.F64: _float_range("float64"),
    ColumnKind.BOOLEAN: _boolean(),
    # Lorem
    ColumnKind.WORD: _text(lambda fake: fake.word()),
    ColumnKind.SENTENCE: _text_with_params(
        ArgumentProfile.RANGE,
        _count_range(SENTENCE_WORD_RANGE),
        lambda fake, p: fake.sentence(
            nb_words=fake.random_int(p.start, p.end), variable_nb_words=False
        ),
    ),
    ColumnKind.PARAGRAPH: _text_with_params(
        ArgumentProfile.RANGE,
        _count_range(PARAGRAPH_SENTENCE_RANGE),
        lambda fake, p: fake.paragraph(
            nb_sentences=fake.random_int(p.start, p.end), variable_nb_sentences=False
        ),
    ),
    # Name
    ColumnKind.FIRST_NAME: _text(lambda fake: fake.first_name()),
    ColumnKind.LAST_NAME: _text(lambda fake: fake.last_name()),
    ColumnKind.TITLE: _text(lambda fake: fake.prefix()),
    ColumnKind.SUFFIX: _text(lambda fake: fake.suffix()),
    ColumnKind.NAME: _text(lambda fake: f"{fake.first_name()} {fake.last_name()}"),
    ColumnKind.NAME_WITH_TITLE: _text(
        lambda fake: f"{fake.prefix()} {fake.first_name()} {fake.last_name()}"
    ),
    # Job
    ColumnKind.SENIORITY: _text(lambda fake: fake.seniority()),
    ColumnKind.FIELD: _text(lambda fake: fake.job_field()),
    ColumnKind.POSITION: _text(lambda fake: fake.job_position()),
    ColumnKind.JOB_TITLE: _text(lambda fake: fake.job_title()),
    # Number
    ColumnKind.DIGIT: _text(lambda fake: fake.random_digit()),
    ColumnKind.NUMBER_WITH_FORMAT: _text_with_params(
        ArgumentProfile.SCALAR, _format_param, lambda fake, p: fake.number_with_format(p.fmt)
    ),
    # Internet
    ColumnKind.FREE_EMAIL_PROVIDER: _text(lambda fake: fake.free_email_domain()),
    ColumnKind.DOMAIN_SUFFIX: _text(lambda fake: fake.tld()),
    ColumnKind.FREE_EMAIL: _text(lambda fake: fake.free_email()),
    ColumnKind.SAFE_EMAIL: _text(lambda fake: fake.safe_email()),
    ColumnKind.USERNAME: _text(lambda fake: fake.user_name()),
    ColumnKind.PASSWORD: _text_with_params(
        ArgumentProfile.RANGE,
        _count_range(PASSWORD_LENGTH_RANGE),
        lambda fake, p: _password(fake, fake.random_int(p.start, p.end)),
    ),
    ColumnKind.IPV4: _text(lambda fake: fake.ipv4()),
    ColumnKind.IPV6: _text(lambda fake: fake.ipv6()),
    ColumnKind.IP: _text(lambda fake: fake.ipv4() if fake.boolean() else fake.ipv6()),
    ColumnKind.MAC_ADDRESS: _text(lambda fake: fake.mac_address()),
    ColumnKind.USER_AGENT: _text(lambda fake: fake.user_agent()),
    # HTTP
    ColumnKind.RFC_STATUS_CODE: _text(lambda fake: fake.rfc_status_code(), TypeFamily.HTTP),
    ColumnKind.VALID_STATUS_CODE: _text(lambda fake: fake.valid_status_code(), TypeFamily.HTTP),
    # Color
    ColumnKind.HEX_COLOR: _text(lambda fake: fake.hex_color(), TypeFamily.COLOR),
    ColumnKind.RGB_COLOR: _text(lambda fake: fake.rgb_color_string(), TypeFamily.COLOR),
    ColumnKind.RGBA_COLOR: _text(lambda fake: fake.rgba_color_string(), TypeFamily.COLOR),
    ColumnKind.HSL_COLOR: _text(lambda fake: fake.hsl_color_string(), TypeFamily.COLOR),
    ColumnKind.HSLA_COLOR: _text(lambda fake: fake.hsla_color_string(), TypeFamily.COLOR),
    ColumnKind.COLOR: _text(lambda fake: fake.color_name(), TypeFamily.COLOR),
    # Company
    ColumnKind.COMPANY_SUFFIX: _text(lambda fake: fake.company_suffix()),
    ColumnKind.COMPANY_NAME: _text(lambda fake: fake.company()),
    ColumnKind.BUZZWORD: _text(lambda fake: fake.buzzword()),
    ColumnKind.BUZZWORD_MIDDLE: _text(lambda fake: fake.buzzword_middle()),
    ColumnKind.BUZZWORD_TAIL: _text(lambda fake: fake.buzzword_tail()),
    ColumnKind.CATCH_PHRASE: _text(lambda fake: fake.catch_phrase()),
    ColumnKind.BS_VERB: _text(lambda fake: fake.bs_verb()),
    ColumnKind.BS_ADJ: _text(lambda fake: fake.bs_adj()),
    ColumnKind.BS_NOUN: _text(lambda fake: fake.bs_noun()),
    ColumnKind.BS: _text(lambda fake: fake.bs()),
    ColumnKind.PROFESSION: _text(lambda fake: fake.job()),
    ColumnKind.INDUSTRY: _text(lambda fake: fake.industry()),
    # Address
    ColumnKind.CITY_PREFIX: _text(lambda fake: fake.city_prefix()),
    ColumnKind.CITY_SUFFIX: _text(lambda fake: fake.city_suffix()),
    ColumnKind.CITY_NAME: _text(lambda fake: fake.city()),
    ColumnKind.COUNTRY_NAME: _text(lambda fake: fake.country()),
    ColumnKind.COUNTRY_CODE: _text(lambda fake: fake.country_code()),
    ColumnKind.STREET_SUFFIX: _text(lambda fake: fake.street_suffix()),
    ColumnKind.STREET_NAME: _text(lambda fake: fake.street_name()),
    ColumnKind.TIME_ZONE: _text(lambda fake: fake.timezone()),
    ColumnKind.STATE_NAME: _text(lambda fake: fake.state()),
    ColumnKind.STATE_ABBR: _text(lambda fake: fake.state_abbr()),
    ColumnKind.SECONDARY_ADDRESS_TYPE: _text(lambda fake: fake.secondary_address_type()),
    ColumnKind.SECONDARY_ADDRESS: _text(lambda fake: fake.secondary_address()),
    ColumnKind.ZIP_CODE: _text(lambda fake: fake.zipcode()),
    ColumnKind.POST_CODE: _text(lambda fake: fake.postcode()),
    ColumnKind.BUILDING_NUMBER: _text(lambda fake: fake.building_number()),
    ColumnKind.LATITUDE: _text(lambda fake: fake.latitude()),
    ColumnKind.LONGITUDE: _text(lambda fake: fake.longitude()),
    ColumnKind.GEOHASH: _text_with_params(
        ArgumentProfile.SCALAR, _precision_param, lambda fake, p: fake.geohash(p.precision)
    ),
    # Automotive
    ColumnKind.LICENCE_PLATE: _text(lambda fake: fake.license_plate(), locale=LICENCE_PLATE_LOCALE),
    # Barcode
    ColumnKind.ISBN: _text(lambda fake: fake.isbn13()),
    ColumnKind.ISBN13: _text(lambda fake: fake.isbn13()),
    ColumnKind.ISBN10: _text(lambda fake: fake.isbn10()),
    # Phone
    ColumnKind.PHONE_NUMBER: _text(lambda fake: fake.phone_number()),
    ColumnKind.CELL_NUMBER: _text(lambda fake: fake.cell_number()),
    # Date and time
    ColumnKind.TIME: _text(lambda fake: fake.time(), TypeFamily.DATETIME),
    ColumnKind.DATE: _text(lambda fake: fake.date(), TypeFamily.DATETIME),
    ColumnKind.DATE_TIME: _text(
        lambda fake: fake.date_time(tzinfo=timezone.utc).isoformat(), TypeFamily.DATETIME
    ),
    ColumnKind.DURATION: _text(
        lambda fake: pd.Timedelta(fake.duration()).isoformat(), TypeFamily.DATETIME
    ),
    ColumnKind.DATE_TIME_BEFORE: _text_with_params(
        ArgumentProfile.TIMESTAMP,
        _timestamp_param,
        lambda fake, p: fake.date_time_in_range(
            _shift(p.moment, -DATETIME_OFFSET_WINDOW), p.moment
        ).isoformat(),
        TypeFamily.DATETIME,
    ),
    ColumnKind.DATE_TIME_AFTER: _text_with_params(
        ArgumentProfile.TIMESTAMP,
        _timestamp_param,
        lambda fake, p: fake.date_time_in_range(
            p.moment, _shift(p.moment, DATETIME_OFFSET_WINDOW)
        ).isoformat(),
        TypeFamily.DATETIME,
    ),
    ColumnKind.DATE_TIME_BETWEEN: _text_with_params(
        ArgumentProfile.TIMESTAMP_RANGE,
        _timestamp_range_param,
        lambda fake, p: fake.date_time_in_range(p.start, p.end).isoformat(),
        TypeFamily.DATETIME,
    ),
    # Filesystem
    ColumnKind.FILE_PATH: _text(lambda fake: fake.file_path()),
    ColumnKind.FILE_NAME: _text(lambda fake: fake.file_name()),
    ColumnKind.FILE_EXTENSION: _text(lambda fake: fake.file_extension()),
    ColumnKind.DIR_PATH: _text(lambda fake: fake.dir_path()),
    # Finance
    ColumnKind.BIC: _text(lambda fake: fake.swift()),
    ColumnKind.CREDIT_CARD_NUMBER: _text(lambda fake: fake.credit_card_number()),
    # UUID
    ColumnKind.UUID_V1: _text(lambda fake: _random_uuid(fake, 1), TypeFamily.UUID),
    ColumnKind.UUID_V3: _text(lambda fake: _random_uuid(fake, 3), TypeFamily.UUID),
    ColumnKind.UUID_V4: _text(lambda fake: _random_uuid(fake, 4), TypeFamily.UUID),
    ColumnKind.UUID_V5: _text(lambda fake: _random_uuid(fake, 5), TypeFamily.UUID),
    # Currency
    ColumnKind.CURRENCY_CODE: _text(lambda fake: fake.currency_code()),
    ColumnKind.CURRENCY_NAME: _text(lambda fake: fake.currency_name()),
    ColumnKind.CURRENCY_SYMBOL: _text(lambda fake: fake.currency_symbol()),
    # Decimal
    ColumnKind.DECIMAL: _decimal(TypeFamily.DECIMAL, DECIMAL_DIGITS, None),
    ColumnKind.POSITIVE_DECIMAL: _decimal(TypeFamily.DECIMAL, DECIMAL_DIGITS, True),
    ColumnKind.NEGATIVE_DECIMAL: _decimal(TypeFamily.DECIMAL, DECIMAL_DIGITS, False),
    ColumnKind.NO_DECIMAL_POINTS: _decimal(TypeFamily.DECIMAL, DECIMAL_DIGITS, None, no_points=True),
    ColumnKind.BIG_DECIMAL: _decimal(TypeFamily.BIGDECIMAL, BIG_DECIMAL_DIGITS, None),
    ColumnKind.POSITIVE_BIG_DECIMAL: _decimal(TypeFamily.BIGDECIMAL, BIG_DECIMAL_DIGITS, True),
    ColumnKind.NEGATIVE_BIG_DECIMAL: _decimal(TypeFamily.BIGDECIMAL, BIG_DECIMAL_DIGITS, False),
    ColumnKind.NO_BIG_DECIMAL_POINTS: _decimal(
        TypeFamily.BIGDECIMAL, BIG_DECIMAL_DIGITS, None, no_points=True
    ),
}


# =============================================================================
# Registry
# =============================================================================


class TypeRegistry:
    """
    Resolves type names to column kinds for one set of enabled type families.

    A kind whose family is disabled is reported exactly like an unknown name.
    """

    def __init__(self, enabled_families: Optional[Iterable[TypeFamily]] = None):
        if enabled_families is None:
            self.enabled_families = frozenset(TypeFamily)
        else:
            self.enabled_families = frozenset(TypeFamily(family) for family in enabled_families)

    def is_enabled(self, kind: ColumnKind) -> bool:
        return CATALOGUE[kind].family in self.enabled_families

    def resolve_kind(self, type_name: str, column_name: Optional[str] = None) -> ColumnKind:
        """
        Map a type name to its ``ColumnKind``.

        Raises:
            UnsupportedTypeError: the name is unknown or its family is disabled
        """
        try:
            kind = ColumnKind(type_name)
        except ValueError:
            raise UnsupportedTypeError(type_name, ErrorContext(column_name=column_name)) from None
        if not self.is_enabled(kind):
            logger.debug(f"Type {type_name} belongs to disabled family {CATALOGUE[kind].family}")
            raise UnsupportedTypeError(type_name, ErrorContext(column_name=column_name))
        return kind

    def strategy_for(self, kind: ColumnKind) -> ColumnStrategy:
        return CATALOGUE[kind]

    def supported_types(self) -> Dict[TypeFamily, List[str]]:
        """Enabled type names grouped by family, in catalogue order."""
        grouped: Dict[TypeFamily, List[str]] = {}
        for kind, strategy in CATALOGUE.items():
            if strategy.family in self.enabled_families:
                grouped.setdefault(strategy.family, []).append(kind.value)
        return grouped

    def dispatch(
        self,
        type_name: str,
        column_name: str,
        row_count: int,
        args: Optional[Mapping[str, Any]] = None,
        pool: Optional["WorkerPool"] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        seed_sequence: Optional[np.random.SeedSequence] = None,
    ) -> pd.Series:
        """Resolve ``type_name`` and generate one column of ``row_count`` values."""
        from fakeframe.python_libs.python.column_generator import ColumnGenerator

        kind = self.resolve_kind(type_name, column_name=column_name)
        generator = ColumnGenerator(pool=pool, chunk_size=chunk_size)
        return generator.generate(
            column_name, self.strategy_for(kind), row_count, args, seed_sequence
        )
