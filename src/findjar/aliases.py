from findjar.core.models import HashType, REGEX_FLAGS

HASH_ALIASES = {hash_type.value: hash_type for hash_type in HashType}

HASH_CHOICES = list(HASH_ALIASES.keys())

HASH_HELP_TEXT = (
    "Calculate file hash(es) for matched files, repeatable:\n"
    + "".join(f"  {name:<8}: {hash_type.description}\n" for name, hash_type in HASH_ALIASES.items())
    + "Example : %(prog)s ~/.m2 -n '\\.clj$' -s sha1 -s md5\n"
)

FLAGS_HELP_TEXT = (
    "Regex flags for all patterns (name, path, apath, grep):\n"
    "  i : case insensitive\n"
    "  m : ^ and $ match at line breaks\n"
    "  s : . matches newlines\n"
    "  x : verbose patterns\n"
    "  a : ASCII-only \\w, \\b, \\d, \\s\n"
    "  u : unicode matching (default)\n"
    "Example : %(prog)s . -n readme -f i"
)


USAGE_TEXT = """
findjar searches for files/content in any disk structure. It looks both for/in
normal files and for/in files inside zip/jar files, with regex matching on file
name, path and content.

For regular files the path pattern (-p) matches against the path relative to the
search root, including the file name:

   ~> findjar ~/.m2 -p '.*asm/asm/3.2.*pom'
   repository/asm/asm/3.2/asm-3.2.pom

whereas for files within jar files, the path pattern matches the string:

   <path-to-jar-file>@<path-within-jar-file>

   ~> findjar ~/.m2 -p '.*asm/asm.*Edge.class'
   repository/asm/asm/3.2/asm-3.2.jar@org/objectweb/asm/Edge.class
"""

EPILOG_TEXT = """
For usage examples, run: %(prog)s --examples
"""

EXAMPLES_TEXT = """
Examples:

(some paths etc have been omitted/abbreviated for brevity)

  1. list all files in maven cache (~/.m2), both directly on disk and
     within jar files:

     ~> findjar ~/.m2

     .../1.6.1/nightlight-1.6.1.pom
     .../1.6.1/nightlight-1.6.1.jar@META-INF/.../nightlight/pom.properties

  2. list all files where file name (-n) matches pattern:

     ~> findjar ~/.m2 -n "string.clj"

     .../clojure-1.9.0.jar@clojure/string.clj
     .../clojure-1.8.0.jar@clojure/string.clj

  3. list files where both file name (-n) and a content line (-g) match,
     printing matching lines with line numbers and highlighted matches.
     Search only files within jar files (-t j):

     ~> findjar clojure/1.9.0 -n "clj" -g "author.*Rich Hickey" -t j

     .../clojure-1.9.0.jar@clojure/set.clj:10  :author "Rich Hickey"}

  4. same as above, with one surrounding line of context (-x):

     ~> findjar clojure/1.9.0 -n "clj" -g "Rich Hickey" -t j -x 1

     .../clojure-1.9.0.jar@clojure/set.clj 9   (ns ^{:doc "Set operations...
     .../clojure-1.9.0.jar@clojure/set.clj:10  :author "Rich Hickey"}
     .../clojure-1.9.0.jar@clojure/set.clj 11  clojure.set)

  5. dump (-c) all files named MANIFEST.MF:

     ~> findjar clojure/1.9.0 -n "MANIFEST.MF" -c

     <<<<<<< clojure-1.9.0.jar@META-INF/MANIFEST.MF
     1 Manifest-Version: 1.0
     2 Archiver-Version: Plexus Archiver
     >>>>>>>

  6. append the dumps to a file (-o) instead of the console:

     ~> findjar clojure/1.9.0 -n "MANIFEST.MF" -c -o manifests.txt

  7. dump only files whose content (-g) matches, highlighting the matches:

     ~> findjar clojure/1.9.0 -n "properties" -g "groupId" -c

  8. calculate sha1 and md5 hashes (-s) of matching files:

     ~> findjar clojure/1.9.0 -n "clj" -s sha1 -s md5

     ...94a86681b58d556f1eb13a clojure-1.9.0.jar@clojure/string.clj
     ...7444756fa91b65 clojure-1.9.0.jar@clojure/string.clj
"""
