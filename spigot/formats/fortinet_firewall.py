# spigot/formats/fortinet_firewall.py
"""Fortinet FortiGate firewall log lines.

Configuration::

    generator:
      type: fortinet:firewall
      timezone: "-0500"   # optional, +HHMM / -HHMM
      vd: root            # optional, virtual domain name
"""

import re
from dataclasses import dataclass
from datetime import datetime
from ipaddress import IPv4Address

from .. import rand
from ..generator import TemplatedGenerator

NAME = 'fortinet:firewall'

FRAME_SIZE = 1500

_HEADER = (
    'date={{ date | utc | strftime("%Y-%m-%d") }} time={{ timestamp }} '
    'devname="{{ dev_name }}" devid="{{ dev_id }}" logid="{{ log_id }}" '
)

TEMPLATES = {
    'event_user': (
        _HEADER +
        'type="event" subtype="user" level="{{ level }}" vd="{{ vd }}" '
        'eventtime={{ date | unix }} tz="{{ timezone }}" '
        'logdesc="FSSO logon authentication status" srcip={{ src_ip }} '
        'user="{{ user }}" server="{{ server }}" action="FSSO-logon" '
        'msg="FSSO-logon event from FSSO_{{ server }}: user {{ user }} logged on {{ src_ip }}"'
    ),
    'event_system': (
        _HEADER +
        'type="event" subtype="system" level="{{ level }}" vd="{{ vd }}" '
        'eventtime={{ date | unix }} tz="{{ timezone }}" '
        'logdesc="FortiSandbox AV database updated" version="1.522479" '
        'msg="FortiSandbox AV database updated"'
    ),
    'utm_dns': (
        _HEADER +
        'type="utm" subtype="dns" eventtype="dns-query" level="{{ level }}" vd="{{ vd }}" '
        'eventtime={{ date | unix }} tz="{{ timezone }}" policyid={{ policy_id }} '
        'sessionid={{ session_id }} srcip={{ src_ip }} srcport={{ src_port }} '
        'srcintf="{{ interface1 }}" srcintfrole="{{ interface_role1 }}" '
        'dstip={{ dst_ip }} dstport=53 dstintf="{{ interface2 }}" '
        'dstintfrole="{{ interface_role2 }}" proto={{ protocol }} profile="{{ server }}" '
        'xid={{ xid }} qname="{{ query_name }}" qtype="{{ query_type }}" qtypeval=1 qclass="IN"'
    ),
    'traffic_forward': (
        _HEADER +
        'type="traffic" subtype="forward" level="{{ level }}" vd="{{ vd }}" '
        'eventtime={{ date | unix }} srcip={{ src_ip }} srcport={{ src_port }} '
        'srcintf="{{ interface1 }}" srcintfrole="{{ interface_role1 }}" '
        'dstip={{ dst_ip }} dstport={{ dst_port }} dstintf="{{ interface2 }}" '
        'dstintfrole="{{ interface_role2 }}" sessionid={{ session_id }} '
        'proto={{ protocol }} action="{{ traffic_action }}" policyid={{ policy_id }} '
        'policytype="policy" service="SNMP" dstcountry="Reserved" srccountry="Reserved" '
        'trandisp="noop" duration={{ duration }} sentbyte={{ sent_bytes }} '
        'rcvdbyte={{ received_bytes }} sentpkt={{ sent_packets }} appcat="unscanned" '
        'crscore=30 craction=131072 crlevel="high"'
    ),
}

DEVICES = (
    "Lakewood", "Midvale", "Brookside", "Holloway", "Fairview", "Westport",
    "Elmswood", "Ridgefield", "Pinehurst", "Stonebridge", "Mapleton",
    "Riverside", "Graysville", "Windermere", "Briarcliff", "Oakridge",
    "Highland", "Copperfield", "Woodhaven", "Silverton", "Rosewood",
    "Cedarcrest", "Ashford", "Elmwood", "Woodbury", "Springfield",
    "Ravenswood", "Stonegate", "Brookhaven", "Southgate", "Seabrook",
    "Edgewood", "Greenfield", "Meadowbrook", "Bellevue", "Clarksville",
    "Oakwood", "Ridgemont", "Crystal_Lake", "Riverview", "Whispering_Pines",
    "Forest_Hill", "Sunnydale", "Mountview", "Woodlake", "Baywood",
    "Brentwood", "Lincolnwood", "Summitville", "Elm_Grove",
)

DEVICE_IDS = (
    "Lakew", "Midva", "Broos", "Hollo", "Fairv", "Westp", "Elmsw", "Ridge",
    "Pineh", "Stonb", "Maple", "Rivers", "Grayv", "Windm", "Briac", "Oakri",
    "Highl", "Copfi", "Woodh", "Silve", "Rosew", "Cedcr", "Ashfo", "Elmwo",
    "Woodb", "Sprin", "Raven", "Stoga", "Brooh", "South", "Seabr", "Edgew",
    "Green", "Meado", "Belle", "Clark", "Oakwo", "Ridgm", "Cryla", "Rivew",
    "Whisp", "Foreh", "Sunny", "Mount", "Woodl", "Baywo", "Brewd", "Lincw",
    "Summi", "Elmgv",
)

USERS = (
    "Liam_Walters", "Emma_Douglas", "Noah_Hamilton", "Olivia_Stevens",
    "Elijah_Baker", "Ava_Reynolds", "James_Thompson", "Sophia_Parker",
    "Lucas_Bennett", "Isabella_Brooks", "Mason_Rogers", "Mia_Campbell",
    "Ethan_Phillips", "Amelia_Bell", "Alexander_Carter", "Charlotte_Adams",
    "Henry_Patterson", "Harper_Wright", "Sebastian_Cooper", "Evelyn_Gray",
    "Jack_Hughes", "Lily_Ross", "Owen_Morris", "Ella_Hayes", "Daniel_Peterson",
    "Aria_Myers", "Samuel_Long", "Chloe_Collins", "Matthew_Hughes",
    "Grace_Cook", "Wyatt_Warren", "Scarlett_Reed", "Caleb_Bryant",
    "Penelope_Rogers", "Isaac_Murphy", "Nora_Jenkins", "Jacob_Cunningham",
    "Hazel_Clark", "Levi_Morgan", "Riley_Perry", "Nathaniel_Foster",
    "Zoey_Ford", "Joshua_Harrison", "Lillian_Sullivan", "David_McCarthy",
    "Avery_Hart", "Andrew_Walker", "Stella_Price", "Thomas_Ward", "Hannah_Hall",
)

LEVELS = ("warning", "notice", "information", "error")

INTERFACES = ("int0", "int1", "int2", "int3", "int4", "int5", "int6", "int7")

ROLES = ("lan", "wan", "internal", "external", "inbound", "outbound")

PROTOCOLS = (6, 17)

QUERIES = (
    "www.silverpinevalley.com", "www.brickstoneridge.net",
    "www.oakwoodgrove.org", "www.bluewaterhaven.co", "www.copperhollow.info",
    "www.windyriverplains.com", "www.crystalbayvillage.net",
    "www.ironwoodcove.org", "www.sunsetbluffresort.co",
    "www.whisperinghillspoint.info", "www.mapleridgeranch.com",
    "www.goldenpeakfarms.net", "www.riverviewmeadows.org",
    "www.stonecreekwoods.co", "www.briarwoodcrossing.info",
    "www.highlandgrovesprings.com", "www.greenfieldretreat.net",
    "www.silverlakehollow.org", "www.rosewoodvista.co", "www.ashforddunes.info",
    "www.willowbrookcourt.com", "www.oakridgefalls.net",
    "www.copperfieldgrove.org", "www.windermerebay.co",
    "www.meadowbrookhaven.info", "www.bellavistaacres.com",
    "www.ridgemontestates.net", "www.sunnydaleshores.org",
    "www.lakewoodreserves.co", "www.westportpines.info",
    "www.elmswoodmeadow.com", "www.ridgefieldplaza.net",
    "www.pinehurstcove.org", "www.stonebridgeflats.co", "www.mapletonlodge.info",
    "www.graysvillemanor.com", "www.windermerepoint.net",
    "www.briarcliffheights.org", "www.oakridgebay.co",
    "www.highlandcrossing.info", "www.copperfieldterrace.com",
    "www.woodhavenhills.net", "www.silvertonview.org", "www.rosewoodvalley.co",
    "www.cedarcrestgrove.info", "www.ashfordpeaks.com", "www.elmwoodlakes.net",
    "www.woodburyridge.org", "www.springfieldbluff.co",
)

QUERY_TYPES = ("A", "AAAA")

SERVERS = (
    "Zeus_prod", "Hera_test", "Poseidon_dev", "Demeter_prod", "Athena_dev",
    "Apollo_test", "Artemis_prod", "Ares_dev", "Aphrodite_test",
    "Hephaestus_prod", "Hermes_dev", "Hestia_test", "Dionysus_prod",
    "Hades_dev", "Persephone_test", "Hecate_prod", "Gaia_dev", "Cronus_test",
    "Rhea_prod", "Eros_dev", "Helios_test", "Selene_prod", "Eos_dev",
    "Nike_test", "Nemesis_prod", "Iris_dev", "Hypnos_test", "Thanatos_prod",
    "Morpheus_dev", "Tyche_test", "Pan_prod", "Eris_dev", "Hebe_test",
    "Nyx_prod", "Khione_dev", "Themis_test", "Harmonia_prod", "Phoebe_dev",
    "Leto_test", "Tethys_prod", "Metis_dev", "Aether_test", "Hemera_prod",
    "Eurus_dev", "Notus_test", "Boreas_prod", "Zephyrus_dev", "Styx_test",
    "Phobos_prod", "Deimos_dev",
)

TRAFFIC_ACTIONS = ("deny", "accept")

_TIMEZONE_RE = re.compile(r'^[+-]\d{4}$')


@dataclass(frozen=True)
class FirewallOptions:
    timezone: str = "-0500"
    vd: str = "root"

    def validate(self) -> None:
        if not _TIMEZONE_RE.match(self.timezone):
            raise ValueError(f"timezone must look like +HHMM or -HHMM, got '{self.timezone}'")
        if not self.vd:
            raise ValueError("vd must not be empty")


@dataclass
class FirewallRecord:
    """Field values for the next firewall line."""
    timestamp: str
    date: datetime
    dev_name: str
    dev_id: str
    log_id: int
    level: str
    vd: str
    timezone: str
    user: str
    server: str
    src_ip: IPv4Address
    src_port: int
    dst_ip: IPv4Address
    dst_port: int
    policy_id: int
    session_id: int
    interface1: str
    interface2: str
    interface_role1: str
    interface_role2: str
    protocol: int
    query_name: str
    query_type: str
    xid: int
    traffic_action: str
    sent_packets: int
    sent_bytes: int
    received_bytes: int
    duration: int


class FortinetFirewall(TemplatedGenerator):
    """FortiGate event, UTM DNS and forward traffic logs."""

    name = NAME
    templates = TEMPLATES
    options_class = FirewallOptions

    def randomize(self) -> FirewallRecord:
        rng = self.rng
        sent_packets = rng.randrange(65536)
        return FirewallRecord(
            timestamp=rand.recent_time(rng),
            date=datetime.now().astimezone(),
            dev_name=rand.choice(DEVICES, rng),
            dev_id=rand.choice(DEVICE_IDS, rng),
            log_id=rng.randrange(10),
            level=rand.choice(LEVELS, rng),
            vd=self.options.vd,
            timezone=self.options.timezone,
            user=rand.choice(USERS, rng),
            server=rand.choice(SERVERS, rng),
            src_ip=rand.ipv4(rng),
            src_port=rand.port(rng),
            dst_ip=rand.ipv4(rng),
            dst_port=rand.port(rng),
            policy_id=rng.randrange(256),
            session_id=rng.randrange(65536),
            interface1=rand.choice(INTERFACES, rng),
            interface2=rand.choice(INTERFACES, rng),
            interface_role1=rand.choice(ROLES, rng),
            interface_role2=rand.choice(ROLES, rng),
            protocol=rand.choice(PROTOCOLS, rng),
            query_name=rand.choice(QUERIES, rng),
            query_type=rand.choice(QUERY_TYPES, rng),
            xid=rng.randrange(256),
            traffic_action=rand.choice(TRAFFIC_ACTIONS, rng),
            sent_packets=sent_packets,
            sent_bytes=sent_packets * FRAME_SIZE,
            received_bytes=rng.randrange(65536) * FRAME_SIZE,
            duration=rng.randrange(1024),
        )


def register(registry) -> None:
    registry.register(NAME, FortinetFirewall)
