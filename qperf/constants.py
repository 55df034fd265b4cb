"""Constants and mappings for the qperf tabulator."""

# Question types in report order. 'M' is the memory-verse aggregate.
QUESTION_TYPES = ['A', 'G', 'I', 'Q', 'R', 'S', 'X', 'V', 'M']

QUESTION_TYPE_INDICES = {qtype: i for i, qtype in enumerate(QUESTION_TYPES)}

# Q, R and V also roll up into the 'M' slot
MEMORY_VERSE_TYPES = frozenset({'Q', 'R', 'V'})
MEMORY_INDEX = QUESTION_TYPE_INDICES['M']

DEFAULT_QUESTION_TYPE = 'G'

# Question sets never hold more than 20 questions per round
MAX_QUESTIONS_PER_ROUND = 20

# Seats per team are numbered 0..MAX_SEATS-1
MAX_SEATS = 10

# QuizMachine wraps text fields in single quotes
QUOTE_MARKER = "'"

# Event codes
CORRECT = 'TC'
ERROR = 'TE'
BONUS_CORRECT = 'BC'
BONUS_ERROR = 'BE'
TEAM_NAME = 'TN'
QUIZZER_NAME = 'QN'
ROOM = 'RM'

SCORING_CODES = frozenset({CORRECT, ERROR, BONUS_CORRECT, BONUS_ERROR})
EVENT_CODES = SCORING_CODES | {TEAM_NAME, QUIZZER_NAME, ROOM}

# Column positions in a QuizMachine log line (0-based)
COLUMNS = {
    'tournament': 1,
    'room': 3,
    'round': 4,
    'question': 5,
    'name': 7,
    'team': 8,
    'seat': 9,
    'code': 10,
}

# Team scoring
CORRECT_POINTS = 20
BONUS_POINTS = 10
QUIZ_OUT_BONUS = 10
QUIZ_OUT_COUNT = 4
PERSON_BONUS = 10
PERSON_BONUS_THRESHOLD = 3
ERROR_PENALTY = 10
ERROR_OUT_COUNT = 3
PENALTY_QUESTION = 16

# Individual stat columns per question type
STAT_COLUMNS = ['Attempted', 'Correct', 'Bonuses Attempted', 'Bonuses Correct']

TEAM_RESULTS_HEADER = ['Name', 'Placement', 'Wins', 'Losses', 'Total Score']

RANKING_EXPLANATION = (
    'Teams are ranked first by number of losses, then by number of wins, '
    'then by head-to-head record. '
)
