"""Built-in dictionaries for the quest mini-games.

These are the default pools handed to the engines when no word files are
configured. Alternatives are comma separated, as in the file based lists.
"""

from .speed_verb import Verb

# Irregular verbs: (base, past simple, past participle, French translations)
VERB_TABLE = (
    ('be', 'was,were', 'been', "être"),
    ('have', 'had', 'had', "avoir"),
    ('do', 'did', 'done', "faire"),
    ('say', 'said', 'said', "dire"),
    ('get', 'got', 'got,gotten', "obtenir,recevoir"),
    ('make', 'made', 'made', "faire,fabriquer"),
    ('go', 'went', 'gone', "aller"),
    ('know', 'knew', 'known', "savoir,connaître"),
    ('think', 'thought', 'thought', "penser"),
    ('take', 'took', 'taken', "prendre"),
    ('see', 'saw', 'seen', "voir"),
    ('come', 'came', 'come', "venir"),
    ('find', 'found', 'found', "trouver"),
    ('give', 'gave', 'given', "donner"),
    ('tell', 'told', 'told', "dire,raconter"),
    ('become', 'became', 'become', "devenir"),
    ('show', 'showed', 'shown,showed', "montrer"),
    ('leave', 'left', 'left', "partir,quitter,laisser"),
    ('feel', 'felt', 'felt', "sentir,ressentir"),
    ('put', 'put', 'put', "mettre"),
    ('bring', 'brought', 'brought', "apporter,amener"),
    ('begin', 'began', 'begun', "commencer"),
    ('keep', 'kept', 'kept', "garder"),
    ('hold', 'held', 'held', "tenir"),
    ('write', 'wrote', 'written', "écrire"),
    ('stand', 'stood', 'stood', "se tenir debout"),
    ('hear', 'heard', 'heard', "entendre"),
    ('let', 'let', 'let', "laisser,permettre"),
    ('mean', 'meant', 'meant', "vouloir dire,signifier"),
    ('set', 'set', 'set', "mettre,fixer"),
    ('meet', 'met', 'met', "rencontrer"),
    ('run', 'ran', 'run', "courir"),
    ('pay', 'paid', 'paid', "payer"),
    ('sit', 'sat', 'sat', "s'asseoir"),
    ('speak', 'spoke', 'spoken', "parler"),
    ('lie', 'lay', 'lain', "être allongé,se coucher"),
    ('lead', 'led', 'led', "mener,conduire"),
    ('read', 'read', 'read', "lire"),
    ('grow', 'grew', 'grown', "grandir,cultiver"),
    ('lose', 'lost', 'lost', "perdre"),
    ('fall', 'fell', 'fallen', "tomber"),
    ('send', 'sent', 'sent', "envoyer"),
    ('build', 'built', 'built', "construire"),
    ('understand', 'understood', 'understood', "comprendre"),
    ('draw', 'drew', 'drawn', "dessiner,tirer"),
    ('break', 'broke', 'broken', "casser,briser"),
    ('spend', 'spent', 'spent', "dépenser,passer (du temps)"),
    ('cut', 'cut', 'cut', "couper"),
    ('rise', 'rose', 'risen', "se lever,augmenter"),
    ('drive', 'drove', 'driven', "conduire"),
    ('buy', 'bought', 'bought', "acheter"),
    ('wear', 'wore', 'worn', "porter (vêtement)"),
    ('choose', 'chose', 'chosen', "choisir"),
    ('sleep', 'slept', 'slept', "dormir"),
    ('win', 'won', 'won', "gagner"),
    ('teach', 'taught', 'taught', "enseigner"),
    ('catch', 'caught', 'caught', "attraper"),
    ('fight', 'fought', 'fought', "se battre"),
    ('throw', 'threw', 'thrown', "lancer,jeter"),
    ('eat', 'ate', 'eaten', "manger"),
    ('sell', 'sold', 'sold', "vendre"),
    ('beat', 'beat', 'beaten', "battre"),
    ('hit', 'hit', 'hit', "frapper,taper"),
    ('hurt', 'hurt', 'hurt', "blesser,faire mal"),
    ('cost', 'cost', 'cost', "coûter"),
    ('shut', 'shut', 'shut', "fermer"),
    ('sing', 'sang', 'sung', "chanter"),
    ('swim', 'swam', 'swum', "nager"),
    ('ring', 'rang', 'rung', "sonner,appeler"),
    ('drink', 'drank', 'drunk', "boire"),
    ('fly', 'flew', 'flown', "voler (dans les airs)"),
    ('forget', 'forgot', 'forgotten', "oublier"),
    ('forgive', 'forgave', 'forgiven', "pardonner"),
    ('freeze', 'froze', 'frozen', "geler"),
    ('hang', 'hung', 'hung', "pendre,suspendre"),
    ('hide', 'hid', 'hidden', "cacher"),
    ('ride', 'rode', 'ridden', "monter (à cheval,vélo)"),
    ('shoot', 'shot', 'shot', "tirer (avec une arme)"),
    ('stick', 'stuck', 'stuck', "coller"),
    ('steal', 'stole', 'stolen', "voler,dérober"),
    ('tear', 'tore', 'torn', "déchirer"),
    ('wake', 'woke', 'woken', "se réveiller"),
    ('dig', 'dug', 'dug', "creuser"),
    ('feed', 'fed', 'fed', "nourrir"),
    ('light', 'lit,lighted', 'lit,lighted', "allumer,éclairer"),
    ('bind', 'bound', 'bound', "lier,attacher"),
    ('bite', 'bit', 'bitten', "mordre"),
    ('bleed', 'bled', 'bled', "saigner"),
    ('blow', 'blew', 'blown', "souffler"),
    ('breed', 'bred', 'bred', "élever (des animaux)"),
    ('cling', 'clung', 'clung', "s'accrocher"),
    ('creep', 'crept', 'crept', "ramper,se faufiler"),
    ('deal', 'dealt', 'dealt', "traiter,gérer"),
    ('forbid', 'forbade', 'forbidden', "interdire"),
    ('kneel', 'knelt,kneeled', 'knelt,kneeled', "s'agenouiller"),
    ('lend', 'lent', 'lent', "prêter"),
    ('seek', 'sought', 'sought', "chercher"),
    ('shake', 'shook', 'shaken', "secouer"),
    ('shine', 'shone', 'shone', "briller"),
    ('shrink', 'shrank,shrunk', 'shrunk,shrunken', "rétrécir"),
    ('slide', 'slid', 'slid', "glisser"),
    ('split', 'split', 'split', "fendre,diviser"),
    ('spread', 'spread', 'spread', "répandre,étaler"),
    ('spring', 'sprang,sprung', 'sprung', "sauter,jaillir"),
    ('stink', 'stank,stunk', 'stunk', "puer"),
    ('strike', 'struck', 'struck', "frapper,heurter"),
    ('swear', 'swore', 'sworn', "jurer"),
    ('sweep', 'swept', 'swept', "balayer"),
    ('swing', 'swung', 'swung', "se balancer"),
    ('undertake', 'undertook', 'undertaken', "entreprendre"),
    ('weep', 'wept', 'wept', "pleurer"),
    ('withdraw', 'withdrew', 'withdrawn', "retirer"),
    ('arise', 'arose', 'arisen', "survenir,se produire"),
    ('bear', 'bore', 'borne,born', "porter,supporter,mettre au monde"),
    ('bet', 'bet', 'bet', "parier"),
    ('broadcast', 'broadcast', 'broadcast', "diffuser (à la radio,TV)"),
    ('burst', 'burst', 'burst', "éclater"),
    ('cast', 'cast', 'cast', "jeter,distribuer un rôle"),
    ('forecast', 'forecast,forecasted', 'forecast,forecasted', "prédire,prévoir"),
    ('foresee', 'foresaw', 'foreseen', "prévoir,anticiper"),
    ('grind', 'ground', 'ground', "moudre"),
    ('lay', 'laid', 'laid', "poser,pondre"),
    ('learn', 'learnt,learned', 'learnt,learned', "apprendre"),
    ('burn', 'burnt,burned', 'burnt,burned', "brûler"),
    ('smell', 'smelt,smelled', 'smelt,smelled', "sentir (odeur)"),
    ('spell', 'spelt,spelled', 'spelt,spelled', "épeler"),
    ('spill', 'spilt,spilled', 'spilt,spilled', "renverser"),
    ('spoil', 'spoilt,spoiled', 'spoilt,spoiled', "gâcher,abîmer"),
    ('lean', 'leant,leaned', 'leant,leaned', "se pencher,s'appuyer"),
    ('leap', 'leapt,leaped', 'leapt,leaped', "sauter"),
    ('bend', 'bent', 'bent', "plier,se pencher"),
    ('flee', 'fled', 'fled', "fuir"),
    ('forgo', 'forwent', 'forgone', "renoncer à"),
    ('overtake', 'overtook', 'overtaken', "dépasser,rattraper"),
    ('upset', 'upset', 'upset', "contrarier,bouleverser"),
    ('withstand', 'withstood', 'withstood', "résister à"),
    ('overcome', 'overcame', 'overcome', "surmonter"),
    ('mistake', 'mistook', 'mistaken', "se tromper sur,confondre"),
    ('wind', 'wound', 'wound', "remonter (une montre),enrouler"),
    ('undergo', 'underwent', 'undergone', "subir"),
    ('prove', 'proved', 'proven,proved', "prouver"),
    ('dream', 'dreamt,dreamed', 'dreamt,dreamed', "rêver"),
    ('dive', 'dived,dove', 'dived', "plonger"),
    ('fit', 'fit,fitted', 'fit,fitted', "aller (taille),convenir"),
    ('quit', 'quit', 'quit', "quitter,abandonner"),
    ('spin', 'spun', 'spun', "tourner,faire tourner"),
    ('spit', 'spat', 'spat', "cracher"),
    ('sting', 'stung', 'stung', "piquer"),
    ('string', 'strung', 'strung', "enfiler,tendre (une corde)"),
    ('wring', 'wrung', 'wrung', "tordre"),
)

VERBS = tuple(
    Verb(base, tuple(ps.split(',')), tuple(pp.split(',')), tuple(tr.split(',')))
    for base, ps, pp, tr in VERB_TABLE
)

# Everyday nouns and adjectives for Wordfall exact mode: English -> French
WORD_TRANSLATIONS = {
    'BOOK': 'livre',
    'CAT': 'chat',
    'DOG': 'chien',
    'HOUSE': 'maison',
    'TREE': 'arbre',
    'WATER': 'eau',
    'BREAD': 'pain',
    'APPLE': 'pomme',
    'CHAIR': 'chaise',
    'TABLE': 'table',
    'DOOR': 'porte',
    'WINDOW': 'fenêtre',
    'SCHOOL': 'école',
    'FRIEND': 'ami (masculin), amie',
    'CITY': 'ville',
    'CAR': 'voiture',
    'GREEN': 'vert',
    'BLUE': 'bleu',
    'SMALL': 'petit',
    'HAPPY': 'heureux / content',
    'GIVE UP': 'abandonner',
    'WAKE UP': 'se réveiller',
}

WORD_EXPRESSIONS = ('GIVE UP', 'WAKE UP')

ENIGMA_TARGET_WORDS = {
    4: [
        'ABLE', 'ACHE', 'ACID', 'AGED', 'AIDE', 'AIMS', 'AIRS', 'ALSO', 'AMID', 'ANTS', 'ARCH', 'AREA', 'ARMS', 'ARMY', 'ARTS', 'ATOM',
        'AWAY', 'BABY', 'BACK', 'BAGS', 'BALL', 'BAND', 'BANK', 'BARE', 'BARK', 'BARN', 'BASE', 'BATH', 'BEAR', 'BEAT', 'BEEN', 'BEER',
        'BELL', 'BELT', 'BEST', 'BIKE', 'BILL', 'BIND', 'BIRD', 'BITE', 'BLOW', 'BLUE', 'BOAT', 'BODY', 'BONE', 'BOOK', 'BOOT', 'BORN',
        'BOTH', 'BOWL', 'BOYS', 'BULK', 'BURN', 'BUSY', 'BYTE', 'CAFE', 'CAGE', 'CAKE', 'CALL', 'CALM', 'CAME', 'CAMP', 'CARD', 'CARE',
    ],
    5: [
        'ABOUT', 'ABOVE', 'ABUSE', 'ACTOR', 'ACUTE', 'ADMIT', 'ADOPT', 'ADULT', 'AFTER', 'AGAIN', 'AGENT', 'AGREE', 'AHEAD', 'ALARM', 'ALBUM',
        'ALERT', 'ALIEN', 'ALIGN', 'ALIKE', 'ALIVE', 'ALLOW', 'ALONE', 'ALONG', 'ALTER', 'AMONG', 'ANGER', 'ANGLE', 'ANGRY', 'APART', 'APPLE',
        'APPLY', 'ARENA', 'ARGUE', 'ARISE', 'ARRAY', 'ASIDE', 'ASSET', 'AUDIO', 'AUDIT', 'AVOID', 'AWAKE', 'AWARD', 'AWARE', 'BADLY', 'BAKER',
        'BASES', 'BASIC', 'BATCH', 'BEACH', 'BEGAN', 'BEGIN', 'BEING', 'BELOW', 'BENCH', 'BIRTH', 'BLACK', 'BLAME', 'BLANK', 'BLAST',
    ],
    6: [
        'ACCEPT', 'ACCESS', 'ACCORD', 'ACROSS', 'ACTION', 'ACTIVE', 'ACTUAL', 'ADVICE', 'AFFORD', 'AFRAID', 'AGENDA', 'AGREED',
        'ALMOST', 'AMOUNT', 'ANCHOR', 'ANIMAL', 'ANNUAL', 'ANSWER', 'ANYONE', 'ANYWAY', 'APPEAL', 'APPEAR', 'AROUND', 'ARREST', 'ARRIVE',
        'ARTIST', 'ASPECT', 'ASSIST', 'ASSUME', 'ATTACH', 'ATTACK', 'ATTEND', 'AUTHOR', 'AUTUMN', 'AVENUE', 'BACKED', 'BACKUP', 'BATTLE', 'BEAUTY',
        'BECOME', 'BEHALF', 'BELIEF', 'BELONG', 'BETTER', 'BEYOND', 'BINARY', 'BISHOP', 'BOUGHT', 'BRANCH', 'BREATH', 'BRIDGE',
    ],
}


def verb_translations() -> dict:
    """English base verb -> first French translation, for Wordfall."""
    return {verb.base.upper(): verb.translations[0] for verb in VERBS if verb.translations}
