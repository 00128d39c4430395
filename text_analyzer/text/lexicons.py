# Static word lists for sentiment scoring and keyword filtering.
# All entries are lowercase; lookups are done on already-lowercased tokens.

POSITIVE_WORDS = frozenset([
    'good', 'great', 'excellent', 'amazing', 'wonderful', 'fantastic', 'perfect', 'love', 'loved', 'best',
    'beautiful', 'awesome', 'outstanding', 'brilliant', 'superb', 'incredible', 'fabulous', 'terrific',
    'delightful', 'impressive', 'exceptional', 'marvelous', 'phenomenal', 'magnificent', 'splendid',
    'happy', 'joy', 'pleased', 'satisfied', 'enjoy', 'enjoyed', 'like', 'liked', 'recommend', 'positive',
    'success', 'successful', 'advantage', 'beneficial', 'improve', 'improved', 'better', 'superior',
])

NEGATIVE_WORDS = frozenset([
    'bad', 'terrible', 'horrible', 'awful', 'poor', 'worst', 'hate', 'hated', 'disappointing', 'disappointed',
    'useless', 'waste', 'boring', 'sucks', 'pathetic', 'disgusting', 'annoying', 'frustrating', 'frustrated',
    'angry', 'sad', 'unhappy', 'dislike', 'disliked', 'negative', 'problem', 'issue', 'fail', 'failed',
    'failure', 'wrong', 'error', 'mistake', 'difficult', 'hard', 'complicated', 'confusing', 'expensive',
    'slow', 'unreliable', 'broken', 'defective', 'damaged',
])

STOPWORDS = frozenset([
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and", "any", "are", "as", "at",
    "be", "because", "been", "before", "being", "below", "between", "both", "but", "by", "can", "could",
    "did", "do", "does", "doing", "down", "during", "each", "few", "for", "from", "further", "had", "has",
    "have", "having", "he", "her", "here", "hers", "herself", "him", "himself", "his", "how", "i", "if",
    "in", "into", "is", "it", "its", "itself", "just", "me", "might", "more", "most", "must", "my", "myself",
    "no", "nor", "not", "now", "of", "off", "on", "once", "only", "or", "other", "our", "ours", "ourselves",
    "out", "over", "own", "s", "same", "she", "should", "so", "some", "such", "t", "than", "that", "the",
    "their", "theirs", "them", "themselves", "then", "there", "these", "they", "this", "those", "through",
    "to", "too", "under", "until", "up", "very", "was", "we", "were", "what", "when", "where", "which",
    "while", "who", "whom", "why", "will", "with", "would", "you", "your", "yours", "yourself", "yourselves",
])
