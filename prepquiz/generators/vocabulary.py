"""Static vocabulary table shared by the verbal generator and flashcards."""

from prepquiz.models.quiz import VocabularyWord


def _word(word: str, meaning: str, example: str, antonym: str | None = None) -> VocabularyWord:
    return VocabularyWord(word=word, meaning=meaning, example=example, antonym=antonym)


VOCABULARY: tuple[VocabularyWord, ...] = (
    _word("abate", "to become less intense or widespread",
          "The storm began to abate after midnight.", "intensify"),
    _word("aberrant", "departing from an accepted standard",
          "The scientist discarded the aberrant test results.", "typical"),
    _word("abundant", "existing in large quantities",
          "Fresh water is abundant in the northern valleys.", "scarce"),
    _word("acclaim", "enthusiastic and public praise",
          "Her first novel received wide acclaim from critics.", "criticism"),
    _word("adept", "very skilled or proficient at something",
          "He is adept at solving puzzles under pressure.", "clumsy"),
    _word("adverse", "preventing success or development",
          "The adverse weather delayed the launch.", "favorable"),
    _word("affluent", "having a great deal of money",
          "They grew up in an affluent suburb.", "impoverished"),
    _word("ambiguous", "open to more than one interpretation",
          "The contract contained an ambiguous clause.", "clear"),
    _word("amiable", "having a friendly and pleasant manner",
          "The amiable host greeted every guest at the door.", "hostile"),
    _word("arduous", "involving strenuous effort",
          "The climb to the summit was long and arduous.", "easy"),
    _word("benevolent", "well meaning and kindly",
          "A benevolent donor paid for the new library.", "malevolent"),
    _word("brevity", "concise and exact use of words",
          "The editor praised the brevity of the report.", "verbosity"),
    _word("candid", "truthful and straightforward",
          "She gave a candid account of her mistakes.", "guarded"),
    _word("cautious", "careful to avoid potential problems",
          "Investors remained cautious after the crash.", "reckless"),
    _word("coherent", "logical and consistent",
          "The team presented a coherent plan for the merger.", "confused"),
    _word("concise", "giving a lot of information clearly in few words",
          "Write a concise summary of the article.", "wordy"),
    _word("conspicuous", "standing out so as to be clearly visible",
          "The red car was conspicuous in the empty lot.", "inconspicuous"),
    _word("copious", "abundant in supply or quantity",
          "She took copious notes during the lecture.", "meager"),
    _word("credible", "able to be believed",
          "The witness gave a credible explanation.", "implausible"),
    _word("deter", "to discourage someone from doing something",
          "High fences deter most trespassers.", "encourage"),
    _word("diligent", "showing care and effort in work",
          "A diligent student reviews every chapter twice.", "lazy"),
    _word("diminish", "to make or become less",
          "The pain will diminish over the next few days.", "increase"),
    _word("discreet", "careful in what one says or does",
          "Please be discreet about the surprise party.", "indiscreet"),
    _word("eloquent", "fluent or persuasive in speaking or writing",
          "The senator gave an eloquent speech.", "inarticulate"),
    _word("elusive", "difficult to find or catch",
          "The elusive fox escaped the hunters again.", "obvious"),
    _word("emulate", "to match or surpass by imitation",
          "Young players often emulate their heroes."),
    _word("ephemeral", "lasting for a very short time",
          "Fame on social media is often ephemeral.", "permanent"),
    _word("erratic", "not even or regular in pattern",
          "The old engine made erratic noises.", "consistent"),
    _word("exemplary", "serving as a desirable model",
          "His conduct during the crisis was exemplary.", "deplorable"),
    _word("frugal", "sparing or economical with money",
          "A frugal shopper compares every price.", "extravagant"),
    _word("futile", "incapable of producing any useful result",
          "Further argument seemed futile.", "fruitful"),
    _word("gregarious", "fond of the company of others",
          "Gregarious people enjoy large parties.", "introverted"),
    _word("hamper", "to hinder or impede the progress of",
          "Heavy snow will hamper the rescue effort.", "facilitate"),
    _word("hostile", "unfriendly and antagonistic",
          "The crowd grew hostile when the match was cancelled.", "friendly"),
    _word("impartial", "treating all rivals equally",
          "A judge must remain impartial.", "biased"),
    _word("inevitable", "certain to happen",
          "Delays were inevitable once the strike began."),
    _word("innovative", "introducing new ideas",
          "The company is known for innovative designs.", "conventional"),
    _word("lucid", "expressed clearly and easy to understand",
          "The professor gave a lucid explanation of the theory.", "obscure"),
    _word("meticulous", "showing great attention to detail",
          "The accountant kept meticulous records.", "careless"),
    _word("mitigate", "to make less severe or painful",
          "New levees will mitigate the risk of flooding.", "aggravate"),
    _word("novice", "a person new to an activity",
          "The novice needed help setting up the tent.", "expert"),
    _word("obsolete", "no longer produced or used",
          "Typewriters became obsolete decades ago.", "current"),
    _word("opaque", "not able to be seen through",
          "The bathroom window is made of opaque glass.", "transparent"),
    _word("optimistic", "hopeful and confident about the future",
          "The coach was optimistic about the season.", "pessimistic"),
    _word("placid", "not easily upset or excited",
          "The placid lake reflected the mountains.", "turbulent"),
    _word("pragmatic", "dealing with things in a practical way",
          "She took a pragmatic approach to the budget.", "idealistic"),
    _word("prudent", "acting with care for the future",
          "It is prudent to save part of every paycheck.", "rash"),
    _word("reluctant", "unwilling and hesitant",
          "He was reluctant to leave his hometown.", "eager"),
    _word("resilient", "able to recover quickly from difficulties",
          "Children are often remarkably resilient.", "fragile"),
    _word("scrutinize", "to examine closely and thoroughly",
          "Auditors scrutinize every expense report.", "ignore"),
    _word("sporadic", "occurring at irregular intervals",
          "There was sporadic rain throughout the day.", "constant"),
    _word("stagnant", "showing no activity or development",
          "Wages remained stagnant for years.", "thriving"),
    _word("substantiate", "to provide evidence to support a claim",
          "The lawyer could not substantiate the accusation.", "refute"),
    _word("succinct", "briefly and clearly expressed",
          "Her answer was succinct and accurate.", "lengthy"),
    _word("superfluous", "unnecessary because more than enough",
          "Remove any superfluous words from the essay.", "essential"),
    _word("tedious", "too long and slow and dull",
          "Sorting the files by hand was tedious work.", "exciting"),
    _word("tenacious", "holding firmly to a purpose",
          "The tenacious reporter chased the story for months.", "irresolute"),
    _word("trivial", "of little value or importance",
          "Do not waste the meeting on trivial details.", "significant"),
    _word("ubiquitous", "present or found everywhere",
          "Smartphones are ubiquitous in modern society.", "rare"),
    _word("vague", "of uncertain or unclear meaning",
          "The instructions were too vague to follow.", "precise"),
    _word("venerate", "to regard with great respect",
          "Many cultures venerate their elders.", "despise"),
    _word("verbose", "using more words than needed",
          "The verbose manual ran to four hundred pages.", "terse"),
    _word("vindicate", "to clear of blame or suspicion",
          "New evidence may vindicate the accused.", "incriminate"),
    _word("wary", "feeling caution about possible problems",
          "Be wary of offers that sound too good to be true.", "trusting"),
    _word("zealous", "showing great energy for a cause",
          "The zealous volunteers worked through the night.", "apathetic"),
)
