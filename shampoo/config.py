# shampoo/config.py

# Session structure
TOTAL_DAYS = 10
STARTING_HEALTH = 100
STARTING_DAYS_SINCE_WASH = 2

# Health economy
MAX_HEALTH = 100
WASH_COST = 15            # health lost per wash
WAIT_RECOVERY = 5         # health regained per day off

# Hair cycle: anything at or past this many days reuses the last bucket
HAIR_CYCLE_MAX_DAYS = 4

# Scoring tuning
FRIED_HEALTH = 20         # below this, quality is capped hard
FRIED_QUALITY_CAP = 5
FRIZZ_HEALTH = 50         # below this, quality is capped softly
FRIZZ_QUALITY_CAP = 8
RAIN_PEAK_QUALITY = 6     # rain on a peak day knocks it down to this
HUMIDITY_PENALTY = 2      # humidity on a fresh wash
WORKOUT_DIRTY_DAYS = 3
WORKOUT_DIRTY_BONUS = 15

# Chaos odds (cumulative walk over the chaos table must reach 1.0)
CHAOS_RAIN_CHANCE = 0.1
CHAOS_HUMIDITY_CHANCE = 0.1
CHAOS_NONE_CHANCE = 0.8

# Per-turn RNG stream: Random(seed + (day + 1) * RNG_STRIDE)
RNG_STRIDE = 10007
SEED_MAX = 1_000_000_000

# UI bands for the health bar
HEALTH_GOOD = 50
HEALTH_WARN = 20
