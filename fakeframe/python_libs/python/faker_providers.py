"""
Faker provider for column types that the stock en_US providers do not cover.

Registered on every Faker instance the column generator creates, so the
methods are available as ``fake.seniority()``, ``fake.geohash(6)`` and so on.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from faker.providers import BaseProvider

GEOHASH_ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"


class TabularProvider(BaseProvider):
    """Extra providers used by the column type catalogue."""

    seniorities = (
        "Lead", "Senior", "Direct", "Corporate", "Dynamic", "Future", "Product",
        "National", "Regional", "District", "Central", "Global", "Customer",
        "Investor", "International", "Legacy", "Forward", "Internal", "Human",
        "Chief", "Principal",
    )
    job_fields = (
        "Solutions", "Program", "Brand", "Security", "Research", "Marketing",
        "Directives", "Implementation", "Integration", "Functionality",
        "Response", "Paradigm", "Tactics", "Identity", "Markets", "Group",
        "Division", "Applications", "Optimization", "Operations",
        "Infrastructure", "Intranet", "Communications", "Web", "Branding",
        "Quality", "Assurance", "Mobility", "Accounts", "Data", "Creative",
        "Configuration", "Accountability", "Interactions", "Factors",
        "Usability", "Metrics",
    )
    job_positions = (
        "Supervisor", "Associate", "Executive", "Liaison", "Officer", "Manager",
        "Engineer", "Specialist", "Director", "Coordinator", "Administrator",
        "Architect", "Analyst", "Designer", "Planner", "Orchestrator",
        "Technician", "Developer", "Producer", "Consultant", "Assistant",
        "Facilitator", "Agent", "Representative", "Strategist",
    )
    industries = (
        "Accounting", "Airlines/Aviation", "Apparel & Fashion", "Automotive",
        "Banking", "Biotechnology", "Broadcast Media", "Chemicals",
        "Civil Engineering", "Computer Software", "Construction",
        "Consumer Electronics", "Defense & Space", "E-Learning",
        "Education Management", "Electrical/Electronic Manufacturing",
        "Entertainment", "Financial Services", "Food & Beverages", "Gambling & Casinos",
        "Government Administration", "Health, Wellness and Fitness",
        "Higher Education", "Hospital & Health Care", "Hospitality",
        "Insurance", "Internet", "Investment Banking", "Legal Services",
        "Logistics and Supply Chain", "Marketing and Advertising",
        "Mechanical or Industrial Engineering", "Media Production", "Mining & Metals",
        "Oil & Energy", "Pharmaceuticals", "Real Estate", "Renewables & Environment",
        "Retail", "Semiconductors", "Telecommunications", "Transportation/Trucking/Railroad",
        "Utilities", "Wholesale", "Wine and Spirits",
    )
    buzzwords = (
        "Adaptive", "Advanced", "Ameliorated", "Assimilated", "Automated",
        "Balanced", "Business-focused", "Centralized", "Cloned", "Compatible",
        "Configurable", "Cross-group", "Customer-focused", "Customizable",
        "Decentralized", "De-engineered", "Devolved", "Digitized", "Distributed",
        "Diverse", "Enhanced", "Enterprise-wide", "Ergonomic", "Exclusive",
        "Expanded", "Extended", "Face-to-face", "Focused", "Front-line",
        "Fully-configurable", "Fundamental", "Future-proofed", "Grass-roots",
        "Horizontal", "Implemented", "Innovative", "Integrated", "Intuitive",
        "Inverse", "Managed", "Mandatory", "Monitored", "Multi-channelled",
        "Networked", "Open-architected", "Operative", "Optimized", "Optional",
        "Organic", "Organized", "Persevering", "Persistent", "Phased",
        "Polarised", "Pre-emptive", "Proactive", "Profit-focused", "Profound",
        "Programmable", "Progressive", "Public-key", "Quality-focused",
        "Reactive", "Realigned", "Re-contextualized", "Re-engineered",
        "Reduced", "Reverse-engineered", "Robust", "Seamless", "Secured",
        "Self-enabling", "Sharable", "Stand-alone", "Streamlined", "Switchable",
        "Synchronised", "Synergistic", "Team-oriented", "Total", "Triple-buffered",
        "Universal", "Up-sized", "Upgradable", "User-centric", "User-friendly",
        "Versatile", "Virtual", "Visionary",
    )
    buzzwords_middle = (
        "24 hour", "24/7", "3rd generation", "4th generation", "5th generation",
        "6th generation", "actuating", "analyzing", "asymmetric", "asynchronous",
        "attitude-oriented", "background", "bandwidth-monitored", "bi-directional",
        "bifurcated", "bottom-line", "clear-thinking", "client-driven",
        "client-server", "coherent", "cohesive", "composite", "context-sensitive",
        "contextually-based", "content-based", "dedicated", "demand-driven",
        "didactic", "directional", "discrete", "disintermediate", "dynamic",
        "eco-centric", "empowering", "encompassing", "even-keeled", "executive",
        "explicit", "exuding", "fault-tolerant", "foreground", "fresh-thinking",
        "full-range", "global", "grid-enabled", "heuristic", "high-level",
        "holistic", "homogeneous", "human-resource", "hybrid", "impactful",
        "incremental", "intangible", "interactive", "intermediate", "leading edge",
        "local", "logistical", "maximized", "methodical", "mission-critical",
        "mobile", "modular", "motivating", "multimedia", "multi-state",
        "multi-tasking", "national", "needs-based", "neutral", "next generation",
        "non-volatile", "object-oriented", "optimal", "optimizing", "radical",
        "real-time", "reciprocal", "regional", "responsive", "scalable",
        "secondary", "solution-oriented", "stable", "static", "systematic",
        "systemic", "system-worthy", "tangible", "tertiary", "transitional",
        "uniform", "upward-trending", "user-facing", "value-added", "web-enabled",
        "well-modulated", "zero administration", "zero defect", "zero tolerance",
    )
    buzzwords_tail = (
        "ability", "access", "adapter", "algorithm", "alliance", "analyzer",
        "application", "approach", "architecture", "archive", "artificial intelligence",
        "array", "attitude", "benchmark", "budgetary management", "capability",
        "capacity", "challenge", "circuit", "collaboration", "complexity",
        "concept", "conglomeration", "contingency", "core", "customer loyalty",
        "database", "data-warehouse", "definition", "emulation", "encoding",
        "encryption", "extranet", "firmware", "flexibility", "focus group",
        "forecast", "frame", "framework", "function", "functionalities",
        "Graphic Interface", "groupware", "Graphical User Interface", "hardware",
        "help-desk", "hierarchy", "hub", "implementation", "info-mediaries",
        "infrastructure", "initiative", "installation", "instruction set",
        "interface", "internet solution", "intranet", "knowledge user",
        "knowledge base", "local area network", "leverage", "matrices",
        "matrix", "methodology", "middleware", "migration", "model", "moderator",
        "monitoring", "moratorium", "neural-net", "open architecture",
        "open system", "orchestration", "paradigm", "parallelism", "policy",
        "portal", "pricing structure", "process improvement", "product",
        "productivity", "project", "projection", "protocol", "secured line",
        "service-desk", "software", "solution", "standardization", "strategy",
        "structure", "success", "superstructure", "support", "synergy",
        "system engine", "task-force", "throughput", "time-frame", "toolset",
        "utilisation", "website", "workforce",
    )
    secondary_address_types = ("Apt.", "Suite")
    cell_number_formats = ("###-###-####", "(###) ###-####", "###.###.####", "1-###-###-####")
    rfc_status_codes = (
        100, 101, 102, 103,
        200, 201, 202, 203, 204, 205, 206, 207, 208, 226,
        300, 301, 302, 303, 304, 305, 307, 308,
        400, 401, 402, 403, 404, 405, 406, 407, 408, 409, 410, 411, 412, 413,
        414, 415, 416, 417, 418, 421, 422, 423, 424, 425, 426, 428, 429, 431, 451,
        500, 501, 502, 503, 504, 505, 506, 507, 508, 510, 511,
    )

    def seniority(self) -> str:
        return self.random_element(self.seniorities)

    def job_field(self) -> str:
        return self.random_element(self.job_fields)

    def job_position(self) -> str:
        return self.random_element(self.job_positions)

    def job_title(self) -> str:
        return f"{self.seniority()} {self.job_field()} {self.job_position()}"

    def industry(self) -> str:
        return self.random_element(self.industries)

    def buzzword(self) -> str:
        return self.random_element(self.buzzwords)

    def buzzword_middle(self) -> str:
        return self.random_element(self.buzzwords_middle)

    def buzzword_tail(self) -> str:
        return self.random_element(self.buzzwords_tail)

    def _bs_part(self, index: int) -> str:
        # en_US bs() is "<verb> <adjective> <noun>"
        return self.generator.bs().split(" ", 2)[index]

    def bs_verb(self) -> str:
        return self._bs_part(0)

    def bs_adj(self) -> str:
        return self._bs_part(1)

    def bs_noun(self) -> str:
        return self._bs_part(2)

    def secondary_address_type(self) -> str:
        return self.random_element(self.secondary_address_types)

    def cell_number(self) -> str:
        return self.numerify(self.random_element(self.cell_number_formats))

    def number_with_format(self, fmt: str) -> str:
        """Replace ``#`` with a digit 0-9 and ``^`` with a digit 1-9."""
        chars = []
        for char in fmt:
            if char == "#":
                chars.append(str(self.random_digit()))
            elif char == "^":
                chars.append(str(self.random_digit_not_null()))
            else:
                chars.append(char)
        return "".join(chars)

    def geohash(self, precision: int) -> str:
        """Geohash of a uniformly random point, ``precision`` characters long."""
        latitude = self.generator.random.uniform(-90.0, 90.0)
        longitude = self.generator.random.uniform(-180.0, 180.0)
        lat_bounds = [-90.0, 90.0]
        lon_bounds = [-180.0, 180.0]

        chars = []
        bits = 0
        bit_count = 0
        use_longitude = True
        while len(chars) < precision:
            value, bounds = (longitude, lon_bounds) if use_longitude else (latitude, lat_bounds)
            mid = (bounds[0] + bounds[1]) / 2
            bits <<= 1
            if value >= mid:
                bits |= 1
                bounds[0] = mid
            else:
                bounds[1] = mid
            use_longitude = not use_longitude
            bit_count += 1
            if bit_count == 5:
                chars.append(GEOHASH_ALPHABET[bits])
                bits = 0
                bit_count = 0
        return "".join(chars)

    def rgb_color_string(self) -> str:
        red, green, blue = (self.random_int(0, 255) for _ in range(3))
        return f"rgb({red}, {green}, {blue})"

    def rgba_color_string(self) -> str:
        red, green, blue = (self.random_int(0, 255) for _ in range(3))
        alpha = self.random_int(0, 100) / 100
        return f"rgba({red}, {green}, {blue}, {alpha})"

    def hsl_color_string(self) -> str:
        return f"hsl({self.random_int(0, 359)}, {self.random_int(0, 100)}%, {self.random_int(0, 100)}%)"

    def hsla_color_string(self) -> str:
        alpha = self.random_int(0, 100) / 100
        return (
            f"hsla({self.random_int(0, 359)}, {self.random_int(0, 100)}%, "
            f"{self.random_int(0, 100)}%, {alpha})"
        )

    def rfc_status_code(self) -> int:
        return self.random_element(self.rfc_status_codes)

    def valid_status_code(self) -> int:
        return self.random_int(100, 599)

    def duration(self) -> timedelta:
        return timedelta(milliseconds=self.random_int(0, 30 * 24 * 3600 * 1000))

    def date_time_in_range(self, start: datetime, end: datetime) -> datetime:
        """Uniform datetime in ``[start, end]`` at microsecond resolution."""
        span = (end - start) // timedelta(microseconds=1)
        return start + timedelta(microseconds=self.generator.random.randint(0, span))

    def dir_path(self, depth: Optional[int] = None) -> str:
        depth = depth if depth is not None else self.random_int(1, 3)
        return "/" + "/".join(self.generator.word() for _ in range(depth))

    def decimal_number(
        self, left_digits: int = 8, right_digits: int = 4, positive: Optional[bool] = None
    ) -> Decimal:
        """
        Random decimal with up to ``left_digits`` integer digits and exactly
        ``right_digits`` fractional digits.

        ``positive=None`` picks the sign at random.
        """
        text = str(self.random_number(digits=left_digits))
        if right_digits:
            text += "." + "".join(str(self.random_digit()) for _ in range(right_digits))
        negative = self.random_int(0, 1) == 1 if positive is None else not positive
        return Decimal(f"-{text}" if negative else text)
