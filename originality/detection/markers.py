# Phrases typical of generic, formulaic machine-written prose.
MARKER_PHRASES: tuple[str, ...] = (
    "in conclusion", "it is important to note", "summary of the",
    "delve into", "comprehensive overview", "significant impact",
    "realm of", "landscape of", "it is worth mentioning",
    "cannot be overstated", "plays a crucial role", "fosters a sense of",
    "testament to", "integration of", "leveraging the power of",
    "transformative potential", "paradigm shift", "underscores the importance",
    "aforementioned", "it should be noted", "complex interplay",
    "multifaceted", "nuanced approach", "instrumental in", "pivotal role",
    "rapidly evolving", "ever-changing", "increasingly important",
    "in today's world", "vital aspect", "key component", "fundamental understanding",
    "holistic approach", "synergistic effect", "navigating the complexities",
    "it is essential to", "by and large", "on the other hand", "conversely",
    "furthermore", "moreover", "in addition to", "not only but also",
    "a diverse range of", "wide array of", "plethora of", "myriad of",
    "in the context of", "deep dive", "uncover the nuances",
    "rich tapestry", "vibrant ecosystem", "cornerstone of",
    "beacon of", "testament to the", "harnessing the potential",
    "unlocking the power", "driving force", "game changer",
    "cutting-edge", "state-of-the-art", "seamless integration",
    "robust framework", "dynamic nature", "intricate balance",
    "delicate balance", "double-edged sword", "step in the right direction",
    "pave the way", "dawn of a new era", "uncharted territory",
    "vast potential", "immense possibilities", "stark contrast",
    "notable example", "prime example", "case in point",
    "illuminates the fact", "sheds light on", "brings to the forefront",
    "highlights the need", "emphasizes the importance", "serves as a reminder",
    "testifies to the", "speaks volumes", "bears witness to",
    "stands as a", "remains to be seen", "only time will tell",
)
