"""
Static lookup tables for human name parsing.

Every entry is stored lowercased with periods removed, which is the same key
the classification predicates compute for a piece before looking it up.
"""

# Titles that never double as given names. Chains of these joined by
# conjunctions are recognized too, e.g. "Deputy Secretary of State".
TITLES = frozenset({
    "dr", "doctor", "miss", "misses", "mr", "mister", "mrs", "ms", "sir", "dame",
    "rev", "madam", "madame", "ab", "2ndlt", "amn", "1stlt", "a1c", "capt", "sra", "maj",
    "ssgt", "ltcol", "tsgt", "col", "briggen", "1stsgt", "majgen", "smsgt", "ltgen",
    "cmsgt", "ccmsgt", "cmsaf", "pvt", "2lt", "pv2", "1lt",
    "pfc", "cpt", "spc", "cpl", "ltc", "sgt", "ssg", "bg", "sfc", "mg",
    "msg", "ltg", "1sgt", "sgm", "csm", "sma", "wo1", "wo2", "wo3", "wo4", "wo5",
    "ens", "sa", "ltjg", "sn", "lt", "po3", "lcdr", "po2", "cdr", "po1", "cpo",
    "radm(lh)", "scpo", "radm(uh)", "mcpo", "vadm", "mcpoc", "adm", "mpco-cg",
    "lcpl", "gysgt", "bgen", "msgt", "mgysgt",
    "gen", "sgtmaj", "sgtmajmc", "wo-1", "cwo-2", "cwo-3", "cwo-4", "cwo-5",
    "rdml", "radm", "mcpon", "fadm", "cwo2", "cwo3", "cwo4", "cwo5",
    "rt", "lord", "lady", "duke", "dutchess", "master", "maid", "uncle", "auntie", "aunt",
    "representative", "senator", "king", "queen", "cardinal", "secretary", "state",
    "foreign", "minister", "speaker", "president", "deputy", "executive", "vice",
    "councillor", "alderman", "delegate", "mayor", "lieutenant", "governor", "prefect",
    "prelate", "premier", "burgess", "ambassador", "envoy", "attaché", "attache",
    "chargé d'affaires", "provost", "marquis", "marquess", "marquise", "marchioness",
    "archduke", "archduchess", "viscount", "baron", "emperor", "empress", "tsar",
    "tsarina", "leader", "abbess", "abbot", "brother", "sister", "friar", "mother",
    "superior", "reverend", "bishop", "archbishop", "metropolitan", "presbyter",
    "priest", "high", "priestess", "father", "patriarch", "pope", "catholicos",
    "vicar", "chaplain", "canon", "pastor", "primate",
    "servant", "venerable", "blessed", "saint", "member", "solicitor",
    "mufti", "grand", "chancellor", "barrister", "bailiff", "attorney", "advocate",
    "deacon", "archdeacon", "acolyte", "elder", "monsignor", "almoner",
    "prof", "professor", "colonel", "general", "commodore", "air", "corporal", "staff", "mate",
    "chief", "first", "sergeant", "admiral", "rear", "brigadier",
    "captain", "group", "commander", "commander-in-chief", "wing",
    "adjutant", "director", "generalissimo", "resident", "surgeon", "officer",
    "academic", "analytics", "business", "credit", "financial", "information",
    "security", "knowledge", "marketing", "operating", "petty", "risk",
    "strategy", "technical", "warrant", "corporate", "customs", "field", "flag",
    "flying", "intelligence", "pilot", "police", "political", "revenue", "senior",
    "private", "principal", "coach", "nurse", "nanny", "docent", "lama",
    "druid", "archdruid", "rabbi", "rebbe", "buddha", "ayatollah", "imam",
    "bodhisattva", "mullah", "mahdi", "saoshyant", "tirthankar", "vardapet",
    "pharaoh", "sultan", "sultana", "maharajah", "maharani",
    "vizier", "chieftain", "comptroller", "courtier", "curator", "doyen", "edohen",
    "ekegbian", "elerunwon", "forester", "gentiluomo", "headman", "intendant",
    "lamido", "marcher", "matriarch", "prior", "pursuivant", "rangatira",
    "ranger", "registrar", "seigneur", "sharif", "shehu", "sheikh", "sheriff", "subaltern",
    "subedar", "sysselmann", "timi", "treasurer", "verderer", "warden", "hereditary",
    "woodman", "bearer", "banner", "swordbearer", "apprentice", "journeyman",
    "adept", "akhoond", "arhat", "bwana", "goodman", "goodwife", "bard", "hajji",
    "baba", "effendi", "giani", "gyani", "guru", "siddha", "pir", "murshid",
    "prime", "united", "states", "national", "associate", "assistant",
    "supreme", "appellate", "judicial", "queen's", "king's", "bench", "right", "majesty",
    "his", "her", "kingdom", "royal", "hon", "honorable", "honourable",
})

# Titles after which a lone name is a given name ("Sir Elton", "Uncle Adam")
# rather than a surname ("Mr. Jones").
FIRST_NAME_TITLES = frozenset({
    "sir", "dame", "king", "queen", "master", "maid", "uncle", "auntie", "aunt",
    "brother", "sister", "mother", "father", "pope", "friar",
})

# Words that precede a last name's base and can be chained, e.g. "de la Vega".
PREFIXES = frozenset({
    "abu", "bon", "bin", "da", "dal", "de", "del", "der", "di", "dí", "ibn",
    "la", "le", "san", "st", "ste", "van", "vel", "von",
})

SUFFIXES = frozenset({
    "esq", "esquire", "jr", "sr", "2", "i", "ii", "iii", "iv", "v", "clu", "chfc",
    "cfp", "md", "phd",
})

CONJUNCTIONS = frozenset({"&", "and", "et", "e", "of", "the", "und", "y"})

CAPITALIZATION_EXCEPTIONS = (
    ("ii", "II"),
    ("iii", "III"),
    ("iv", "IV"),
    ("md", "M.D."),
    ("phd", "Ph.D."),
)
