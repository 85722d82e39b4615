# spigot/formats/citrix_cef.py
"""Citrix NetScaler application firewall logs in CEF.

Field meanings follow the Citrix ADC CEF log component reference. The
format has no options::

    generator:
      type: citrix:cef
"""

from dataclasses import dataclass
from datetime import datetime
from ipaddress import IPv4Address

from .. import rand
from ..generator import TemplatedGenerator

NAME = 'citrix:cef'

TEMPLATES = {
    'appfw': (
        '{{ timestamp | strftime(time_layout) }} <{{ facility }}.{{ priority }}> {{ addr }} '
        'CEF:{{ cef_version }}|{{ vendor }}|{{ product }}|{{ version }}|{{ module }}|'
        '{{ violation }}|{{ severity }}|src={{ src_addr }} '
        '{% if geo %}geolocation={{ geo }} {% endif %}'
        'spt={{ src_port }} method={{ method }} request={{ request }} msg={{ message }} '
        'cn1={{ event_id | itoa }} cn2={{ tx_id | itoa }} cs1={{ profile }} cs2={{ ppe_id }} '
        'cs3={{ sess_id }} cs4={{ severity_label }} cs5={{ year }} '
        '{% if violation_category %}cs6={{ violation_category }} {% endif %}'
        'act={{ action }}'
    ),
}

TIME_LAYOUTS = (
    "%b %d %H:%M:%S",
    "%b %-d %H:%M:%S",
)

FACILITIES = (
    "auth", "authpriv", "cron", "daemon", "kern", "lpr", "mail", "mark",
    "news", "syslog", "user", "uucp", "local0", "local1", "local2", "local3",
    "local4", "local5", "local6", "local7",
)

PRIORITIES = (
    "debug", "info", "notice", "warning", "warn", "err", "error", "crit",
    "alert", "emerg", "panic",
)

VENDORS = ("Citrix",)

PRODUCTS = ("NetScalar",)

VERSIONS = ("NS10.0", "NS11.0")

MODULES = ("APPFW",)

VIOLATIONS = (
    "APPFW_FIELDCONSISTENCY",
    "APPFW_SAFECOMMERCE",
    "APPFW_SAFECOMMERCE_XFORM",
    "APPFW_SIGNATURE_MATCH",
    "APPFW_STARTURL",
)

# Empty string means the line carries no geolocation.
LOCATIONS = (
    "",
    "Unknown",
    "NorthAmerica.Altimoria.Corvax.CityCenter.*.*",
    "NorthAmerica.Florensia.Novath.TremorValley.*.*",
    "NorthAmerica.Gallania.Rovento.Sunridge.*.*",
    "NorthAmerica.Baltoria.Velzora.PolarisHeights.*.*",
    "NorthAmerica.Novadia.Quivera.FlamingRidge.*.*",
    "NorthAmerica.Xandria.Velmos.Riverstone.*.*",
    "NorthAmerica.Kestoria.Yalvaz.CrimsonHill.*.*",
    "NorthAmerica.Vollara.Zendar.AuroraPeaks.*.*",
    "NorthAmerica.Quintara.Pallaxa.SilverLake.*.*",
    "NorthAmerica.Morovia.Korvath.SolarisPlains.*.*",
    "NorthAmerica.Serenia.Ryland.Stormview.*.*",
    "NorthAmerica.Zyrenthia.Vortak.Ironcliff.*.*",
    "NorthAmerica.Valoria.Draconis.WildroseGlen.*.*",
    "NorthAmerica.Tarvonia.Felwind.ShadowGrove.*.*",
    "NorthAmerica.Lorasia.Velthra.Sunspire.*.*",
    "NorthAmerica.Talvaxia.Balaria.CrimsonFalls.*.*",
    "NorthAmerica.Elandria.Kovoria.Glintwood.*.*",
    "NorthAmerica.Orlanta.Zandor.Mistvale.*.*",
    "NorthAmerica.Valteris.Xanoris.ThunderValley.*.*",
    "NorthAmerica.Morlonia.Phaedra.EchoHaven.*.*",
    "NorthAmerica.Theria.Vestoria.TremorHollow.*.*",
    "NorthAmerica.Zarvath.Mystara.Glintwood.*.*",
    "NorthAmerica.Kalandor.Volvax.Silverstrand.*.*",
    "NorthAmerica.Olivar.Ventara.CrimsonMesa.*.*",
    "NorthAmerica.Theronia.Pyrax.ThunderRidge.*.*",
    "NorthAmerica.Veloria.Zyros.Moonshadow.*.*",
    "NorthAmerica.Zovaris.Korvax.Stormcrest.*.*",
    "NorthAmerica.Valentia.Rivenor.Sunblade.*.*",
    "NorthAmerica.Zeltria.Orex.Shadowridge.*.*",
    "NorthAmerica.Voronia.Xelthra.Thunderpeak.*.*",
    "SouthAmerica.Viridia.Malothia.JadeHollow.*.*",
    "SouthAmerica.Malandria.Aurelia.PhoenixBay.*.*",
    "SouthAmerica.Valcoria.Lorvia.EmeraldIsle.*.*",
    "SouthAmerica.Aronya.Valeria.MysticFalls.*.*",
    "SouthAmerica.Celestia.Palvoria.EbonyVale.*.*",
    "SouthAmerica.Zorvia.Sarath.TalonCliffs.*.*",
    "SouthAmerica.Celentis.Volara.Dreamshade.*.*",
    "SouthAmerica.Valthera.Tarvora.CrimsonCove.*.*",
    "SouthAmerica.Xanthia.Theros.MysticGrove.*.*",
    "SouthAmerica.Selveria.Pyros.Riverwind.*.*",
    "SouthAmerica.Volthea.Arventis.ShadowGlen.*.*",
    "SouthAmerica.Eldoria.Lithara.Thunderstone.*.*",
    "SouthAmerica.Korvax.Talora.Sunspire.*.*",
    "SouthAmerica.Vyxoria.Zandros.Shadowvale.*.*",
    "SouthAmerica.Pyronia.Volcath.SilentHill.*.*",
    "SouthAmerica.Zylandria.Orvath.CrimsonBay.*.*",
    "SouthAmerica.Valtheris.Vorlon.Suncrest.*.*",
    "SouthAmerica.Xylandria.Antaris.EchoValley.*.*",
    "SouthAmerica.Novanta.Pallaxa.LunarGrove.*.*",
    "SouthAmerica.Quilara.Talvos.StormBluff.*.*",
    "SouthAmerica.Vandora.Valzor.SilverStream.*.*",
    "SouthAmerica.Xyvronia.Lithara.MysticCove.*.*",
    "SouthAmerica.Selvoria.Vorvath.ThunderGlen.*.*",
    "SouthAmerica.Valencia.Orvalon.Rivercrest.*.*",
    "SouthAmerica.Xylothia.Zentar.GlintRidge.*.*",
    "SouthAmerica.Voloria.Sylvara.TwilightPeak.*.*",
    "Europe.Maldera.Quinthra.Shadowpeak.*.*",
    "Europe.Talvoria.Aurex.LunarHollow.*.*",
    "Europe.Valtoria.Xelara.SunfallGlen.*.*",
    "Europe.Xylandria.Korinox.StormCrest.*.*",
    "Europe.Ceridia.Vandor.SilverGrove.*.*",
    "Europe.Kytheria.Zorthal.Ravenridge.*.*",
    "Europe.Zypheria.Malvora.Sunwood.*.*",
    "Europe.Volaxia.Talendria.Moonstone.*.*",
    "Europe.Karvoria.Vorlon.EchoMesa.*.*",
    "Europe.Thalandia.Zaltor.Sunridge.*.*",
    "Europe.Vantoria.Syldor.CrimsonHollow.*.*",
    "Europe.Xantheas.Oltar.Stormwind.*.*",
    "Europe.Quinthia.Aetheris.ThunderCliff.*.*",
    "Europe.Rovinthar.Zyros.CrimsonGlade.*.*",
    "Europe.Selveris.Vorath.MoonBluff.*.*",
    "Europe.Talvora.Zyloth.Glintwood.*.*",
    "Europe.Valtheris.Vorath.MysticHaven.*.*",
    "Europe.Zelvoris.Altira.Silverthorn.*.*",
    "Europe.Valthera.Kylos.Sunspire.*.*",
    "Europe.Xyphera.Voltara.ShadowMire.*.*",
    "Europe.Celathra.Tharvos.MysticCove.*.*",
    "Europe.Theronis.Orvax.CrimsonPeak.*.*",
    "Europe.Selvorn.Korvath.ThunderBay.*.*",
    "Europe.Zantheria.Voloria.SilverMesa.*.*",
    "Europe.Xyrelia.Talvora.RavenGlen.*.*",
    "Europe.Valoria.Zelthra.Moonrise.*.*",
    "Europe.Quinthara.Olthera.SilverLake.*.*",
    "Europe.Zoltara.Ryvon.ThunderHill.*.*",
    "Europe.Selvoris.Vorland.Suncrest.*.*",
    "Europe.Theronix.Xarvath.CrimsonRidge.*.*",
    "Europe.Korvaris.Valthros.StormBay.*.*",
    "Europe.Valdoria.Quinthos.EchoGrove.*.*",
    "Africa.Voltheon.Zoltris.Suncrest.*.*",
    "Africa.Thalvaria.Ravinthar.LunarHollow.*.*",
    "Africa.Valoria.Xalvath.ThunderPlains.*.*",
    "Africa.Zorvath.Selenor.Silverpeak.*.*",
    "Africa.Vandora.Kylandar.MysticRidge.*.*",
    "Africa.Quinthar.Valthoria.Stormshade.*.*",
    "Africa.Xylothar.Vorath.SunValley.*.*",
    "Africa.Zelandia.Theronis.CrimsonCove.*.*",
    "Africa.Vantheon.Selvos.Moonspire.*.*",
    "Africa.Therondar.Volaria.ShadowGrove.*.*",
    "Africa.Valdoria.Altira.LunarBay.*.*",
    "Africa.Selvoria.Xylandor.Glintwood.*.*",
    "Africa.Xyronia.Valtheris.Sunridge.*.*",
    "Africa.Quinthar.Voltara.ThunderGrove.*.*",
    "Africa.Valterra.Olthoria.CrimsonBluff.*.*",
    "Africa.Xalvoria.Zorath.MysticPeak.*.*",
    "Africa.Thalvaris.Zanthon.Sunstone.*.*",
    "Africa.Rovinthar.Vantoria.EchoRidge.*.*",
    "Africa.Selthara.Zorvath.SilverCrest.*.*",
    "Africa.Xylandra.Valdoria.MoonRidge.*.*",
    "Africa.Valtheris.Zolvaris.ShadowValley.*.*",
    "Africa.Vorlonia.Thalvaris.Thunderstone.*.*",
    "Africa.Xalvaris.Zeltria.Sunbluff.*.*",
    "Africa.Vandaria.Rovinthar.GlintPeak.*.*",
    "Africa.Thalvath.Xoltris.SilverVale.*.*",
    "Africa.Valdaria.Sylvoris.MoonCrest.*.*",
    "Africa.Seltheris.Voltrax.CrimsonHill.*.*",
    "Africa.Valtheris.Rovinthor.SunGrove.*.*",
    "Africa.Xarvath.Zorvinth.StormValley.*.*",
    "Africa.Kylandor.Valthros.Glintstone.*.*",
    "Africa.Sylvoria.Zelvath.MoonGlen.*.*",
    "Asia.Valdoria.Tharvos.SunGrove.*.*",
    "Asia.Xelthar.Vorlon.Moonshade.*.*",
    "Asia.Zantheria.Vorath.StormVale.*.*",
    "Asia.Valtheris.Selvath.ThunderCrest.*.*",
    "Asia.Tharvath.Xoltria.Sunbluff.*.*",
    "Asia.Zolvaris.Valthros.ShadowGrove.*.*",
    "Asia.Xarvath.Selvorn.Moonstone.*.*",
    "Asia.Voltaris.Zeltria.GlintRidge.*.*",
    "Asia.Seltharis.Valoria.Sunwood.*.*",
    "Asia.Valtoris.Thalvath.MysticGrove.*.*",
    "Asia.Zarvath.Xelvos.CrimsonPeak.*.*",
    "Asia.Volaris.Tharvon.Shadowvale.*.*",
    "Asia.Xelvoris.Valtheria.SilverGlen.*.*",
    "Asia.Valdoria.Zorvath.LunarHollow.*.*",
    "Asia.Xylandar.Valvoria.Sunstone.*.*",
    "Asia.Theronis.Voltrax.Glintwood.*.*",
    "Asia.Zeltria.Valtoria.StormGlen.*.*",
    "Asia.Vanthara.Tharvath.ThunderBay.*.*",
    "Asia.Selthra.Zoltrax.Moonridge.*.*",
    "Asia.Valtheria.Zarvath.Sunbluff.*.*",
    "Asia.Xoltria.Volaria.SilverBay.*.*",
    "Asia.Theronis.Valdaria.Shadowstone.*.*",
    "Asia.Valvoria.Zyloth.SunVale.*.*",
    "Asia.Xantheria.Thalvath.Moonstone.*.*",
    "Asia.Zarvath.Valthros.GlintGlen.*.*",
    "Asia.Vorathia.Xelthros.Suncrest.*.*",
    "Asia.Selvoria.Zolvaris.CrimsonHill.*.*",
    "Asia.Valdoris.Theronis.MoonGrove.*.*",
)

METHODS = ("GET", "POST")

REQUESTS = (
    r"http://aaron.stratum8.net/FFC/login.html",
    r"http://aaron.stratum8.net/FFC/login.php?login_name=abc&passwd=123456789234&drinking_pref=on&text_area=&loginButton=ClickToLogin&as_sfid=AAAAAAWIahZuYoIFbjBhYMP05mJLTwEfIY0a7AKGMg3jIBaKmwtK4t7M7lNxOgj7Gmd3SZc8KUj6CR6a7W5kIWDRHN8PtK1Zc-txHkHNx1WknuG9DzTuM7t1THhluevXu9I4kp8%3D&as_fid=feeec8758b41740eedeeb6b35b85dfd3d5def30c",
    r"http://aaron.stratum8.net/FFC/wwwboard/passwd.txt",
    r"http://aaron.stratum8.net/FFC/CreditCardMind.html",
    r"http://vpx247.example.net/FFC/CreditCardMind.html",
    r"http://vpx247.example.net/FFC/login_post.html?abc\=def",
    r"http://vpx247.example.net/FFC/wwwboard/passwd.txt",
)

MESSAGES = (
    "Signature violation rule ID 807: web-cgi /wwwboard/passwd.txt access",
    "Disallow Illegal URL.",
    "Transformed (xout) potential credit card numbers seen in server response",
    "Maximum number of potential credit card numbers seen",
    "Field consistency check failed for field passwd",
)

PROFILES = ("pr_ffc",)

SEVERITY_LABELS = ("INFO", "ALERT")

VIOLATION_CATEGORIES = ("", "web-cgi", "sql-injection", "phishing")

ACTIONS = ("blocked", "not blocked", "transformed")

SESSION_ID_BYTES = 16


@dataclass
class CEFRecord:
    timestamp: datetime
    time_layout: str
    facility: str
    priority: str
    addr: IPv4Address
    cef_version: int
    vendor: str
    product: str
    version: str
    module: str
    violation: str
    severity: int
    src_addr: IPv4Address
    geo: str
    src_port: int
    method: str
    request: str
    message: str
    event_id: int
    tx_id: int
    profile: str
    ppe_id: str
    sess_id: str
    severity_label: str
    year: int
    violation_category: str
    action: str


class CitrixCEF(TemplatedGenerator):
    """NetScaler APPFW violation events."""

    name = NAME
    templates = TEMPLATES

    def randomize(self) -> CEFRecord:
        rng = self.rng
        timestamp = datetime.now()
        return CEFRecord(
            timestamp=timestamp,
            time_layout=rand.choice(TIME_LAYOUTS, rng),
            facility=rand.choice(FACILITIES, rng),
            priority=rand.choice(PRIORITIES, rng),
            addr=rand.ipv4(rng),
            cef_version=rng.randrange(2),
            vendor=rand.choice(VENDORS, rng),
            product=rand.choice(PRODUCTS, rng),
            version=rand.choice(VERSIONS, rng),
            module=rand.choice(MODULES, rng),
            violation=rand.choice(VIOLATIONS, rng),
            severity=rng.randint(1, 10),
            src_addr=rand.ipv4(rng),
            geo=rand.choice(LOCATIONS, rng),
            src_port=rand.port(rng),
            method=rand.choice(METHODS, rng),
            request=rand.choice(REQUESTS, rng),
            message=rand.choice(MESSAGES, rng),
            event_id=rng.randrange(1000),
            tx_id=rng.randrange(100000),
            profile=rand.choice(PROFILES, rng),
            ppe_id=f"PPE{rng.randint(1, 9)}",
            sess_id=rand.hex_bytes(SESSION_ID_BYTES, self.fake),
            severity_label=rand.choice(SEVERITY_LABELS, rng),
            year=timestamp.year,
            violation_category=rand.choice(VIOLATION_CATEGORIES, rng),
            action=rand.choice(ACTIONS, rng),
        )


def register(registry) -> None:
    registry.register(NAME, CitrixCEF)
