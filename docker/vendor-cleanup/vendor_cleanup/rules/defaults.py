"""Built-in cleanup rules.

Each package maps to an ordered list of rule groups. A group is a string of
space separated glob patterns, relative to the package directory. Keep each
group reasonably short; long groups are split into several entries.
"""

DOCS = "README* CHANGELOG* FAQ* CONTRIBUTING* HISTORY* UPGRADING* UPGRADE* package* demo example examples doc docs readme*"
TESTS = ".travis.yml .scrutinizer.yml phpcs.xml* phpcs.php phpunit.xml* phpunit.php test tests Tests travis"


DEFAULT_RULES: dict[str, list[str]] = {
    # Symfony
    "symfony/browser-kit": [DOCS, TESTS],
    "symfony/class-loader": [DOCS, TESTS],
    "symfony/console": [DOCS, TESTS],
    "symfony/css-selector": [DOCS, TESTS],
    "symfony/debug": [DOCS, TESTS],
    "symfony/dom-crawler": [DOCS, TESTS],
    "symfony/event-dispatcher": [DOCS, TESTS],
    "symfony/filesystem": [DOCS, TESTS],
    "symfony/finder": [DOCS, TESTS],
    "symfony/http-foundation": [DOCS, TESTS],
    "symfony/http-kernel": [DOCS, TESTS],
    "symfony/process": [DOCS, TESTS],
    "symfony/routing": [DOCS, TESTS],
    "symfony/security": [DOCS, TESTS],
    "symfony/security-core": [DOCS, TESTS],
    "symfony/translation": [DOCS, TESTS],
    "symfony/var-dumper": [DOCS, TESTS],
    "symfony/yaml": [DOCS, TESTS],
    # Doctrine
    "doctrine/annotations": [DOCS, TESTS, "bin"],
    "doctrine/cache": [DOCS, TESTS, "bin"],
    "doctrine/collections": [DOCS, TESTS],
    "doctrine/common": [DOCS, TESTS, "bin lib/vendor"],
    "doctrine/dbal": [DOCS, TESTS, "bin build* docs2 lib/vendor"],
    "doctrine/inflector": [DOCS, TESTS],
    "doctrine/instantiator": [DOCS, TESTS],
    "doctrine/lexer": [DOCS, TESTS],
    "doctrine/orm": [DOCS, TESTS, "bin build* docs2 lib/vendor"],
    # Laravel
    "laravel/framework": [DOCS, TESTS, "build"],
    "laravel/lumen-framework": [DOCS, TESTS],
    "illuminate/support": [DOCS, TESTS],
    # Common libraries
    "barryvdh/laravel-debugbar": [DOCS, TESTS],
    "barryvdh/laravel-ide-helper": [DOCS, TESTS],
    "maximebf/debugbar": [DOCS, TESTS, "demo"],
    "classpreloader/classpreloader": [DOCS, TESTS],
    "dnoegel/php-xdg-base-dir": [DOCS, TESTS],
    "filp/whoops": [DOCS, TESTS, "examples"],
    "guzzle/guzzle": [DOCS, TESTS, "phar-stub.php build.xml"],
    "guzzlehttp/guzzle": [DOCS, TESTS, "Makefile"],
    "guzzlehttp/promises": [DOCS, TESTS, "Makefile"],
    "guzzlehttp/psr7": [DOCS, TESTS, "Makefile"],
    "ircmaxell/password-compat": [DOCS, TESTS, "version-test.php"],
    "jakub-onderka/php-console-color": [DOCS, TESTS, "example.php"],
    "jakub-onderka/php-console-highlighter": [DOCS, TESTS, "examples"],
    "jeremeamia/superclosure": [DOCS, TESTS, "demo"],
    "league/flysystem": [DOCS, TESTS],
    "monolog/monolog": [DOCS, TESTS, "*.mdown"],
    "mtdowling/cron-expression": [DOCS, TESTS],
    "nesbot/carbon": [DOCS, TESTS],
    "nikic/php-parser": [DOCS, TESTS, "test_old grammar bin/php-parse"],
    "phpdocumentor/reflection-docblock": [DOCS, TESTS],
    "phpspec/prophecy": [DOCS, TESTS, "spec"],
    "phpunit/php-code-coverage": [DOCS, TESTS, "build.xml"],
    "phpunit/phpunit": [DOCS, TESTS, "build build.xml phpdox.xml *.xsd"],
    "predis/predis": [DOCS, TESTS, "bin examples"],
    "psr/log": [DOCS, TESTS],
    "psy/psysh": [DOCS, TESTS, "bin/build* phpcs.xml"],
    "ramsey/uuid": [DOCS, TESTS],
    "swiftmailer/swiftmailer": [DOCS, TESTS, "build* notes test-suite create_pear_package.php"],
    "tijsverkoyen/css-to-inline-styles": [DOCS, TESTS],
    "twig/twig": [DOCS, TESTS, "ext"],
    "vlucas/phpdotenv": [DOCS, TESTS],
    # Frontend assets shipped through the package manager
    "components/jquery": [DOCS, "src"],
    "twbs/bootstrap": [DOCS, TESTS, "grunt js/tests less test-infra _* *.html"],
    "fortawesome/font-awesome": [DOCS, "src less scss *.json"],
    "ezyang/htmlpurifier": [DOCS, TESTS, "art benchmarks configdoc maintenance smoketest"],
    "phpoffice/phpexcel": [DOCS, TESTS, "Examples unitTests changelog.txt"],
    "tecnickcom/tcpdf": [DOCS, TESTS, "examples tools"],
}
