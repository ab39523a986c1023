"""
Built-in passphrase dictionary.

Short, common, lowercase English words that are easy to type and hard to
confuse when read aloud. Passphrase entropy is computed from the size of
this list, so adding or removing words changes reported entropy.

The list is about 600 words, roughly 9.3 bits per word, so the default
four-word lowercase passphrase comes to about 37 bits. Use more words, a
case transform, digits or a larger custom list when more is needed.
"""

_RAW = """
able acid acorn actor adapt admit adopt after agent agree ahead aisle alarm
album alert alien alley allow alpha amber amino ample amuse angel anger angle
ankle apple april apron arena argue armor aroma arrow aspen atlas attic audio
avoid awake award bacon badge bagel baker balmy banjo barge basil basin batch
beach beard bench berry bison black blade blank blaze blend bless blimp blink
bloom blues bluff blunt board boast bonus boost booth bored brain brave bread
brick bride brief brisk broad brook broom brush buddy bugle built bunch bunny
cabin cable cacao camel candy canoe canal cargo carol carry cedar chalk charm
chase cheek cheer chess chest chief chili chirp chive cider cinch civic clamp
clasp claw clay clerk cliff climb cloak clock cloud clover coach coast cobra
cocoa comet coral couch cough crane crate crawl crisp crumb cubic cupid curly
cycle daily dairy daisy dance dandy decal decoy delta denim depot diary dingo
diner disco ditch diver dizzy dodge donor dough dozen draft drama dream drift
drill drink drove dusty eagle early earth easel ebony echo eclair edge elbow
elder elite ember empty enjoy entry equal erupt essay ethic event exact extra
fable facet fairy faith fancy fauna feast fence ferry fetch fever fiber field
fifty finch flair flame flask fleet flint float flock flora flour fluid flute
focus foggy forge forty fossil frame fresh frost fruit fudge funny gecko giant
ginger given glade glass gleam glide globe glove goose gourd grace grain grand
grape graph grass gravy great green grill groove grove guard guest guide habit
hammer handy happy harbor hardy harp hatch haven hazel heart hedge hello hero
heron hobby honey hotel humid husky icing igloo image index inlet ivory jacket
jelly jewel jolly judge juice jumbo jumpy kayak kebab kettle khaki kiosk kitty
knack knife koala label ladle lake lance lapel large laser latch lemon level
lilac limit linen lipid llama lobby local lodge lofty logic lotus loyal lucky
lunar lunch lyric magic mango manor maple march marsh mason match mayor medal
melon mercy merit metal mimic minty mirth mocha model moose morse moss
motor mound mouse movie muddy mural music nacho naval needle nerve never
ninja noble noise north novel nudge nutmeg oasis ocean olive omega onion opera
orbit order otter outer oxide ozone paddle paint panda panel paper parka party
pasta patch peach pearl pecan pedal penny perch piano pilot pinch pixel pizza
plaid plain plank plaza plump poem polar pond poppy porch pouch power prism
prize proud prune pulse punch puppy purple quail quake quart queen quest quick
quiet quilt quote radar radio raft rainy rally ranch raven razor ready realm
rebel relax relay remix rhino rider ridge rigid rinse ripen rival river roast
robin robot rocky rodeo roman roost rover royal ruby rugby ruler rumba rusty
saddle salad salsa salty sandy satin sauce scale scarf scene scoop scout
scrap shade shaky shark sheep shelf shell shine shiny shore shrub siren skate
slate sleek slice slope smile smoky snack snail snowy sober solar solid sonic
south space spark spice spine spoon sport spray squid stack stage stamp stand
steam steel stone stork storm stove straw stream sugar sunny super surf swamp
swift syrup table tango taper teddy tempo thorn thumb tiger toast topaz torch
totem tower track trail train treat trend tribe trick tulip tuna tundra twist
ultra umbra uncle unity upper urban usher utter valid valve vapor vault velvet
venue verse vigor vinyl viola violet visor vital vivid vocal voice waffle
wagon walnut waltz water waxen weave wedge whale wheat wheel whisk widow
width willow windy witty wizard woken woody world woven wrist yacht yearn
yeast yodel young yummy zebra zesty zippy zonal
"""

# Order matters: indexes into this tuple are what the generator draws.
WORDS: tuple[str, ...] = tuple(dict.fromkeys(_RAW.split()))

DICTIONARY_SIZE = len(WORDS)
