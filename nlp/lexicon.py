"""
TitleGuard — Tagger Lexicon
Closed-class word lists and small open-class dictionaries for the
LexiconTagger. Everything is lowercase with ASCII apostrophes.
"""

# ── Pronouns ──────────────────────────────────────────────────────────────────
FIRST_PERSON = {
    "i", "me", "my", "mine", "myself", "we", "us", "our", "ours", "ourselves",
    "i'm", "i've", "i'll", "i'd", "we're", "we've", "we'll", "we'd",
}

PRONOUNS = FIRST_PERSON | {
    "you", "your", "yours", "yourself", "you're", "you've", "you'll",
    "he", "him", "his", "himself", "he's", "she", "her", "hers", "herself", "she's",
    "it", "its", "itself", "it's", "they", "them", "their", "theirs", "themselves",
    "they're", "they've", "who", "whom", "whose", "everyone", "everybody",
    "someone", "somebody", "anyone", "nobody",
}

# Possessives make a following verb/noun ambiguous word read as a noun.
POSSESSIVES = {"my", "our", "your", "his", "her", "its", "their", "whose"}

# ── Determiners ───────────────────────────────────────────────────────────────
DEICTIC_WORDS = ("this", "that", "these", "those")

DETERMINERS = set(DEICTIC_WORDS) | {
    "the", "a", "an", "some", "any", "every", "each", "no", "all", "both",
    "another", "other", "such", "either", "neither", "which", "what",
}

# ── Prepositions / conjunctions ───────────────────────────────────────────────
PREPOSITIONS = {
    "about", "above", "across", "after", "against", "along", "among", "around",
    "at", "before", "behind", "below", "beneath", "beside", "between", "beyond",
    "by", "despite", "down", "during", "except", "for", "from", "in", "inside",
    "into", "like", "near", "of", "off", "on", "onto", "out", "outside", "over",
    "past", "per", "since", "through", "throughout", "till", "to", "toward",
    "towards", "under", "until", "unlike", "up", "upon", "via", "vs", "with",
    "within", "without",
}

CONJUNCTIONS = {
    "and", "or", "but", "nor", "yet", "because", "if", "unless", "while",
    "whereas", "although", "though", "when", "whenever", "where", "why", "how",
    "than", "as", "once", "so",
}

# ── Verbs (base forms; inflections resolved by the tagger) ────────────────────
COPULAS = {
    "is", "are", "was", "were", "be", "been", "being", "am", "isn't", "aren't",
    "wasn't", "weren't",
}

AUXILIARIES = COPULAS | {
    "do", "does", "did", "don't", "doesn't", "didn't", "have", "has", "had",
    "haven't", "hasn't", "will", "would", "can", "could", "should", "shall",
    "may", "might", "must", "won't", "wouldn't", "can't", "couldn't",
    "shouldn't", "let's",
}

VERBS = {
    "get", "got", "gotten", "make", "made", "take", "took", "taken", "go", "went",
    "gone", "come", "came", "see", "saw", "seen", "know", "knew", "known",
    "think", "thought", "tell", "told", "find", "found", "give", "gave", "given",
    "need", "want", "try", "tried", "use", "work", "call", "ask", "feel", "felt",
    "leave", "left", "put", "mean", "meant", "keep", "kept", "let", "begin",
    "began", "seem", "help", "show", "shown", "hear", "heard", "play", "run",
    "ran", "move", "live", "believe", "bring", "brought", "happen", "write",
    "wrote", "written", "sit", "sat", "stand", "stood", "lose", "lost", "pay",
    "paid", "meet", "met", "include", "continue", "learn", "change", "lead",
    "led", "understand", "understood", "watch", "follow", "stop", "create",
    "speak", "spoke", "read", "spend", "spent", "grow", "grew", "open", "walk",
    "win", "won", "offer", "remember", "love", "consider", "appear", "buy",
    "bought", "wait", "serve", "die", "send", "sent", "expect", "build",
    "built", "stay", "fall", "fell", "cut", "reach", "kill", "remain",
    "suggest", "raise", "pass", "sell", "sold", "require", "report", "decide",
    "pull", "cook", "bake", "fix", "eat", "ate", "eaten", "drink", "drank",
    "sleep", "slept", "drive", "drove", "ride", "rode", "fly", "flew", "swim",
    "catch", "caught", "break", "broke", "broken", "destroy", "save", "react",
    "reveal", "expose", "explain", "review", "test", "unbox", "rank", "rate",
    "compare", "beat", "survive", "escape", "prank", "ruin", "regret", "hate",
    "like", "look", "wish", "miss", "quit", "fail", "cure", "change", "stole",
    "steal", "hide", "hid", "hidden", "burn", "crash", "scam", "cheat", "earn",
    "invest", "start", "end", "finish", "become", "became", "turn", "happened",
    "do", "did", "done", "cry", "laugh", "scream", "shock", "freak", "discover",
    "build", "install", "upgrade", "repair", "clean", "paint", "draw", "sing",
    "dance", "train", "edit", "record", "stream", "vote", "ban", "sue",
    "arrest", "confront", "ignore", "check", "need", "hack", "trick", "cost",
    "hit", "set", "shut", "wear", "wore", "worn",
}

# Verb base forms that are also ordinary nouns; read as nouns after a
# determiner, adjective or possessive.
NOUN_VERBS = {
    "watch", "play", "work", "call", "help", "show", "run", "change", "love",
    "review", "test", "rank", "fix", "hack", "trick", "cut", "fall", "drink",
    "dance", "train", "record", "stream", "vote", "ban", "scam", "cheat",
    "start", "end", "turn", "cure", "need", "look", "wish", "cost", "hit",
    "set", "crash", "burn", "prank", "use", "walk", "ride", "drive", "sleep",
    "break", "repair", "upgrade", "edit", "check", "reveal", "offer", "report",
    "shock", "escape", "paint", "build", "cook", "win",
}

# ── Nouns ─────────────────────────────────────────────────────────────────────
TIME_NOUNS = {
    "year", "years", "month", "months", "week", "weeks", "day", "days",
    "weekend", "weekends", "morning", "mornings", "afternoon", "evening",
    "night", "nights", "hour", "hours", "minute", "minutes", "second",
    "seconds", "season", "seasons", "summer", "winter", "spring", "autumn",
    "time", "times", "decade", "decades", "century", "era", "moment",
    "today", "tonight", "tomorrow", "yesterday",
}

NOUNS = TIME_NOUNS | {
    "thing", "things", "trick", "hack", "video", "channel", "game", "movie",
    "song", "music", "food", "money", "car", "house", "home", "phone", "computer",
    "kitchen", "item", "tool", "tip", "secret", "way", "reason", "result",
    "people", "person", "man", "woman", "men", "women", "kid", "kids", "child",
    "children", "family", "friend", "friends", "dog", "cat", "animal", "world",
    "life", "story", "news", "truth", "problem", "question", "answer", "idea",
    "challenge", "compilation", "tutorial", "recipe", "pasta", "guide", "review",
    "reaction", "vlog", "update", "trailer", "episode", "part", "stock",
    "market", "job", "school", "city", "country", "water", "fire", "plan",
    "method", "mistake", "habit", "diet", "body", "brain", "face", "hand",
    "head", "heart", "eye", "eyes", "hair", "skin", "health", "doctor",
    "teacher", "boss", "player", "team", "fan", "fans", "camera", "build",
    "setup", "device", "app", "site", "trip", "travel", "hotel", "restaurant",
    "beach", "mountain", "river", "ocean", "island", "road", "street", "room",
    "office", "store", "shop", "product", "price", "deal", "spot", "spots",
    "level", "boss", "weapon", "gun", "knife", "sword", "ship", "plane",
    "train", "bike", "boat", "engine", "tire", "garden", "plant", "tree",
    "flower", "fish", "bird", "horse", "cow", "pig", "chicken", "egg", "bread",
    "cake", "pizza", "burger", "coffee", "tea", "beer", "wine", "party",
    "wedding", "birthday", "holiday", "christmas", "gift", "toy", "book",
    "letter", "word", "name", "number", "list", "rule", "law", "war", "battle",
    "fight", "match", "race", "goal", "score", "point", "win", "loss",
    "disease", "diseases", "cure", "medicine", "drug", "pill", "virus",
    "scammer", "scam", "cheats", "prank", "interview", "podcast", "lesson",
    "course", "class", "exam", "test", "experiment", "science", "history",
    "math", "art", "drawing", "painting", "song", "album", "band", "concert",
    "show", "series", "season", "finale", "ending", "end", "start", "beginning",
    "asmr", "unboxing", "haul", "routine", "workout", "exercise", "gym",
    "something", "everything", "nothing", "anything", "stuff",
}

# ── Adjectives / adverbs ──────────────────────────────────────────────────────
ADJECTIVES = {
    "good", "bad", "great", "best", "worst", "better", "worse", "big", "small",
    "huge", "tiny", "new", "old", "young", "real", "fake", "true", "false",
    "easy", "hard", "simple", "quick", "fast", "slow", "cheap", "expensive",
    "rich", "poor", "free", "crazy", "insane", "amazing", "awesome", "weird",
    "strange", "scary", "creepy", "funny", "sad", "happy", "angry", "crazy",
    "epic", "viral", "secret", "hidden", "ultimate", "perfect", "terrible",
    "horrible", "awful", "incredible", "unbelievable", "shocking", "wild",
    "cool", "hot", "cold", "dark", "bright", "first", "last", "next", "final",
    "only", "entire", "whole", "full", "empty", "long", "short", "high", "low",
    "far", "close", "near", "deep", "strong", "weak", "dead", "alive", "broken",
    "rare", "common", "special", "normal", "different", "same", "important",
    "possible", "impossible", "serious", "dangerous", "safe", "legendary",
    "massive", "brutal", "savage", "wholesome", "cursed", "illegal", "legal",
    "ready", "done", "sure", "clear", "wrong", "right", "nice", "beautiful",
    "ugly", "pretty", "tasty", "delicious", "healthy", "limited", "gross",
    "stupid", "smart", "dumb", "lazy", "busy", "guilty", "popular", "famous",
    "bizarre", "genius", "overpowered", "op", "much", "many", "more", "most",
    "few", "less", "least", "several", "own", "early", "late", "fine", "okay",
}

ADVERBS = {
    "very", "so", "too", "really", "actually", "just", "still", "even", "never",
    "always", "ever", "almost", "quite", "rather", "pretty", "totally",
    "literally", "finally", "now", "then", "here", "there", "again", "already",
    "soon", "once", "twice", "only", "also", "maybe", "perhaps", "overnight",
    "instantly", "forever", "away", "back", "together", "alone", "anymore",
    "not", "n't", "how", "why", "where", "when", "well",
}

# -ly words that are not adverbs
LY_NOT_ADVERB = {
    "family", "reply", "supply", "fly", "ally", "belly", "jelly", "bully",
    "rally", "holy", "ugly", "early", "daily", "friendly", "lonely", "lovely",
    "silly", "only", "italy", "sally", "molly", "emily", "lily", "kelly",
    "july", "assembly", "anomaly", "butterfly", "monopoly", "curly", "likely",
}

ADJECTIVE_SUFFIXES = ("ous", "ful", "ive", "able", "ible", "less", "ical", "ish", "istic")

# ── Values ────────────────────────────────────────────────────────────────────
NUMBER_WORDS = {
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen", "twenty", "thirty",
    "forty", "fifty", "sixty", "seventy", "eighty", "ninety", "hundred",
    "hundreds", "thousand", "thousands", "million", "millions", "billion",
    "billions", "dozen", "dozens", "half", "second", "third", "fourth", "fifth",
    "tenth", "hundredth",
}

# ── Gazetteers (single-token names) ───────────────────────────────────────────
PLACES = {
    "america", "usa", "uk", "england", "britain", "scotland", "ireland",
    "wales", "canada", "mexico", "brazil", "argentina", "france", "paris",
    "germany", "berlin", "italy", "rome", "spain", "madrid", "portugal",
    "lisbon", "russia", "moscow", "ukraine", "poland", "sweden", "norway",
    "finland", "denmark", "netherlands", "amsterdam", "belgium", "switzerland",
    "austria", "greece", "turkey", "egypt", "israel", "iran", "iraq", "india",
    "china", "beijing", "japan", "tokyo", "korea", "seoul", "vietnam",
    "thailand", "bangkok", "philippines", "manila", "indonesia", "bali",
    "australia", "sydney", "melbourne", "zealand", "africa", "nigeria",
    "kenya", "london", "manchester", "liverpool", "dublin", "chicago",
    "boston", "texas", "california", "florida", "alaska", "hawaii", "vegas",
    "miami", "seattle", "denver", "atlanta", "dallas", "houston", "toronto",
    "vancouver", "montreal", "dubai", "singapore", "hollywood", "antarctica",
    "europe", "asia", "iceland", "venice", "barcelona", "prague", "vienna",
    "budapest", "istanbul", "cairo", "mars", "everest", "sahara", "amazon",
}

PERSONS = {
    "john", "james", "michael", "david", "robert", "william", "richard",
    "joseph", "thomas", "charles", "daniel", "matthew", "mark", "paul",
    "steven", "andrew", "kevin", "brian", "george", "elon", "jeff", "bill",
    "taylor", "swift", "beyonce", "drake", "kanye", "obama", "trump", "biden",
    "musk", "bezos", "gates", "jobs", "mrbeast", "pewdiepie", "gordon",
    "ramsay", "mary", "patricia", "jennifer", "linda", "elizabeth", "susan",
    "jessica", "sarah", "karen", "nancy", "lisa", "emma", "olivia", "sophia",
    "anna", "tom", "jack", "harry", "peter", "sam", "alex", "chris", "mike",
    "messi", "ronaldo", "lebron", "jordan", "einstein", "newton", "napoleon",
    "shakespeare", "mozart", "beethoven", "lincoln", "washington", "churchill",
}

HONORIFICS = {"mr", "mrs", "ms", "dr", "sir", "lord", "lady", "king", "queen", "prince", "princess"}

# Gazetteer entries that are also everyday words; only trusted when capitalized.
NAME_HOMOGRAPHS = {
    "jobs", "gates", "mark", "bill", "swift", "jordan", "amazon", "turkey",
    "taylor", "mars", "jack", "will", "may", "china", "sam", "paul", "drake",
    "washington", "lincoln", "newton", "sahara", "chris", "george", "harry",
}
