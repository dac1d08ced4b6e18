"""
Prompt Analyzer
===============

Suggests target programming languages for a natural-language prompt.

Scoring is a keyword/regex heuristic over static tables:

* every language profile awards points for keywords and framework names found
  as substrings of the lower-cased prompt, and for regex patterns matching the
  original prompt (patterns are case-insensitive);
* project-type phrases ("rest api", "landing page", ...) add a flat bonus to
  each associated language;
* a handful of contextual words ("web", "style", "data", "performance", ...)
  add fixed boosts.

Scores only accumulate. Confidence is ``min(score / 5, 1)``. The analyzer is a
pure function of the prompt and the read-only tables below.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Pattern, Sequence, Tuple

from codegen.constants import DEFAULT_LANGUAGE

KEYWORD_FACTOR = 2.0
PATTERN_FACTOR = 1.5
FRAMEWORK_FACTOR = 1.8
PROJECT_TYPE_BONUS = 1.5
CONFIDENCE_DIVISOR = 5.0
MAX_SUGGESTIONS = 5
ENHANCE_CONFIDENCE_THRESHOLD = 0.6


@dataclass(frozen=True)
class LanguageProfile:
    """Scoring profile of a single language."""
    keywords: Tuple[str, ...]
    patterns: Tuple[Pattern[str], ...]
    frameworks: Tuple[str, ...]
    weight: float = 1.0


def _profile(keywords: Sequence[str], patterns: Sequence[str], frameworks: Sequence[str], weight: float) -> LanguageProfile:
    return LanguageProfile(
        keywords=tuple(keywords),
        patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns),
        frameworks=tuple(frameworks),
        weight=weight,
    )


LANGUAGE_PROFILES: Mapping[str, LanguageProfile] = MappingProxyType({
    'javascript': _profile(
        keywords=[
            'javascript', 'js', 'node', 'nodejs', 'react', 'vue', 'angular', 'express',
            'npm', 'yarn', 'dom', 'browser', 'frontend', 'backend', 'api', 'json',
            'async', 'await', 'promise', 'callback', 'jquery', 'typescript', 'es6',
            'webpack', 'babel', 'next.js', 'nuxt', 'electron', 'cordova', 'ionic',
        ],
        patterns=[
            r'\b(function|const|let|var)\b',
            r'\b(arrow function|fat arrow)\b',
            r'\b(console\.log|document\.)\b',
            r'\b(require|import|export)\b',
            r'\b(onclick|onload|event)\b',
        ],
        frameworks=['react', 'vue', 'angular', 'express', 'next.js', 'nuxt'],
        weight=1.0,
    ),
    'python': _profile(
        keywords=[
            'python', 'py', 'django', 'flask', 'pandas', 'numpy', 'matplotlib',
            'tensorflow', 'pytorch', 'scikit-learn', 'jupyter', 'anaconda',
            'pip', 'virtualenv', 'lambda', 'list comprehension', 'decorator',
            'machine learning', 'data science', 'ai', 'automation', 'script',
        ],
        patterns=[
            r'\b(def|class|import|from)\b',
            r'\b(print|input|range)\b',
            r'\b(if __name__ == "__main__")\b',
            r'\b(self|cls)\b',
            r'\b(pip install|conda)\b',
        ],
        frameworks=['django', 'flask', 'fastapi', 'pandas', 'numpy'],
        weight=1.0,
    ),
    'html': _profile(
        keywords=[
            'html', 'webpage', 'website', 'landing page', 'form', 'table',
            'responsive', 'bootstrap', 'css', 'styling', 'layout', 'ui',
            'user interface', 'frontend', 'web page', 'markup', 'semantic',
            'accessibility', 'seo', 'meta tags', 'responsive design',
        ],
        patterns=[
            r'\b(div|span|p|h1|h2|h3|button|input|form)\b',
            r'\b(html|head|body|title)\b',
            r'\b(class|id|style)\b',
            r'\b(<\w+>|</\w+>)\b',
            r'\b(responsive|mobile-first)\b',
        ],
        frameworks=['bootstrap', 'tailwind', 'bulma', 'foundation'],
        weight=1.2,
    ),
    'css': _profile(
        keywords=[
            'css', 'styling', 'design', 'layout', 'responsive', 'flexbox',
            'grid', 'animation', 'transition', 'sass', 'scss', 'less',
            'tailwind', 'bootstrap', 'material design', 'ui design',
            'color scheme', 'typography', 'media queries', 'hover effects',
        ],
        patterns=[
            r'\b(color|background|margin|padding|border)\b',
            r'\b(flex|grid|position|display)\b',
            r'\b(hover|active|focus|visited)\b',
            r'\b(@media|@keyframes)\b',
            r'\b(px|em|rem|vh|vw|%)\b',
        ],
        frameworks=['tailwind', 'bootstrap', 'sass', 'less'],
        weight=1.1,
    ),
    'java': _profile(
        keywords=[
            'java', 'spring', 'maven', 'gradle', 'android', 'jsp', 'servlet',
            'hibernate', 'jpa', 'enterprise', 'microservices', 'rest api',
            'junit', 'mockito', 'object oriented', 'oop', 'inheritance',
            'polymorphism', 'encapsulation', 'abstraction', 'interface',
        ],
        patterns=[
            r'\b(public class|private|protected|static)\b',
            r'\b(void|String|int|boolean|double)\b',
            r'\b(extends|implements|abstract)\b',
            r'\b(System\.out\.println|Scanner)\b',
            r'\b(try|catch|finally|throw)\b',
        ],
        frameworks=['spring', 'hibernate', 'struts', 'maven'],
        weight=1.0,
    ),
    'cpp': _profile(
        keywords=[
            'c++', 'cpp', 'c plus plus', 'object oriented', 'oop', 'stl',
            'template', 'namespace', 'pointer', 'reference', 'memory management',
            'performance', 'game development', 'system programming', 'embedded',
            'algorithm', 'data structure', 'competitive programming',
        ],
        patterns=[
            r'\b(#include|using namespace|std::)\b',
            r'\b(class|struct|template|typename)\b',
            r'\b(cout|cin|endl|vector|string)\b',
            r'\b(new|delete|malloc|free)\b',
            r'\b(public:|private:|protected:)\b',
        ],
        frameworks=['qt', 'boost', 'opencv', 'eigen'],
        weight=1.0,
    ),
    'csharp': _profile(
        keywords=[
            'c#', 'csharp', 'dotnet', '.net', 'asp.net', 'mvc', 'wpf', 'winforms',
            'entity framework', 'linq', 'xamarin', 'blazor', 'unity',
            'visual studio', 'nuget', 'class library', 'web api', 'windows',
        ],
        patterns=[
            r'\b(using|namespace|class|interface)\b',
            r'\b(public|private|protected|internal)\b',
            r'\b(string|int|bool|double|decimal)\b',
            r'\b(Console\.WriteLine|Console\.ReadLine)\b',
            r'\b(try|catch|finally|throw)\b',
        ],
        frameworks=['asp.net', 'entity framework', 'xamarin', 'blazor'],
        weight=1.0,
    ),
    'php': _profile(
        keywords=[
            'php', 'laravel', 'symfony', 'wordpress', 'drupal', 'codeigniter',
            'web development', 'server side', 'mysql', 'database', 'cms',
            'web application', 'backend', 'api', 'rest', 'composer',
        ],
        patterns=[
            r'\b(<\?php|\?>)\b',
            r'\b(echo|print|var_dump)\b',
            r'\b(\$\w+|function|class)\b',
            r'\b(mysqli|pdo|sql)\b',
            r'\b(include|require|namespace)\b',
        ],
        frameworks=['laravel', 'symfony', 'codeigniter', 'wordpress'],
        weight=1.0,
    ),
    'sql': _profile(
        keywords=[
            'sql', 'database', 'query', 'table', 'select', 'insert', 'update',
            'delete', 'join', 'mysql', 'postgresql', 'sqlite', 'oracle',
            'stored procedure', 'trigger', 'index', 'foreign key', 'primary key',
            'normalization', 'crud', 'data analysis', 'reporting',
        ],
        patterns=[
            r'\b(SELECT|INSERT|UPDATE|DELETE|CREATE|DROP|ALTER)\b',
            r'\b(FROM|WHERE|JOIN|GROUP BY|ORDER BY|HAVING)\b',
            r'\b(INNER JOIN|LEFT JOIN|RIGHT JOIN|FULL JOIN)\b',
            r'\b(COUNT|SUM|AVG|MAX|MIN)\b',
            r'\b(PRIMARY KEY|FOREIGN KEY|INDEX)\b',
        ],
        frameworks=['mysql', 'postgresql', 'sqlite', 'mongodb'],
        weight=1.3,
    ),
    'go': _profile(
        keywords=[
            'go', 'golang', 'goroutine', 'channel', 'concurrency', 'microservices',
            'docker', 'kubernetes', 'api', 'web server', 'performance',
            'system programming', 'cloud', 'distributed systems',
        ],
        patterns=[
            r'\b(package|import|func|var|const)\b',
            r'\b(go|goroutine|channel|select)\b',
            r'\b(fmt\.Print|fmt\.Println)\b',
            r'\b(defer|panic|recover)\b',
            r'\b(struct|interface|map|slice)\b',
        ],
        frameworks=['gin', 'echo', 'fiber', 'beego'],
        weight=1.0,
    ),
    'rust': _profile(
        keywords=[
            'rust', 'memory safety', 'performance', 'system programming',
            'cargo', 'crate', 'ownership', 'borrowing', 'lifetime',
            'concurrency', 'web assembly', 'blockchain', 'game development',
        ],
        patterns=[
            r'\b(fn|let|mut|const|static)\b',
            r'\b(struct|enum|impl|trait)\b',
            r'\b(println!|print!|panic!)\b',
            r'\b(match|if let|while let)\b',
            r'\b(Option|Result|Vec|HashMap)\b',
        ],
        frameworks=['actix', 'rocket', 'tokio', 'serde'],
        weight=1.0,
    ),
})

# Project-type phrase -> languages receiving a flat bonus. Languages without a
# scoring profile (swift, kotlin, r, bash) are listed for completeness only.
PROJECT_TYPES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'web application': ('javascript', 'html', 'css', 'python', 'php'),
    'mobile app': ('javascript', 'java', 'swift', 'kotlin'),
    'desktop application': ('java', 'csharp', 'cpp', 'python'),
    'game': ('cpp', 'csharp', 'javascript'),
    'api': ('javascript', 'python', 'java', 'go', 'php'),
    'database': ('sql',),
    'data analysis': ('python', 'sql', 'r'),
    'machine learning': ('python',),
    'system programming': ('cpp', 'rust', 'go'),
    'automation script': ('python', 'bash'),
    'website': ('html', 'css', 'javascript'),
    'landing page': ('html', 'css', 'javascript'),
    'form': ('html', 'css', 'javascript'),
    'dashboard': ('javascript', 'python', 'html', 'css'),
    'crud': ('javascript', 'python', 'java', 'php', 'sql'),
    'rest api': ('javascript', 'python', 'java', 'go', 'php'),
    'microservice': ('javascript', 'python', 'java', 'go'),
    'algorithm': ('python', 'java', 'cpp', 'javascript'),
    'data structure': ('python', 'java', 'cpp', 'javascript'),
})

# (trigger words, {language: boost}); a rule fires once if any trigger is present
CONTEXT_BOOSTS: Tuple[Tuple[Tuple[str, ...], Mapping[str, float]], ...] = (
    (('web', 'website'), MappingProxyType({'html': 2.0, 'css': 1.5, 'javascript': 2.0})),
    (('style', 'design'), MappingProxyType({'css': 2.0, 'html': 1.0})),
    (('data', 'analysis'), MappingProxyType({'python': 2.0, 'sql': 1.5})),
    (('performance', 'fast'), MappingProxyType({'cpp': 1.5, 'rust': 1.5, 'go': 1.2})),
)

LANGUAGE_HINTS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'javascript': (
        'Use modern ES6+ syntax',
        'Include proper error handling',
        'Add JSDoc comments',
        'Consider async/await for promises',
    ),
    'python': (
        'Follow PEP 8 style guide',
        'Use type hints where appropriate',
        'Include docstrings',
        'Handle exceptions properly',
    ),
    'html': (
        'Use semantic HTML elements',
        'Include proper meta tags',
        'Ensure accessibility',
        'Make it responsive',
    ),
    'css': (
        'Use modern CSS features',
        'Include responsive design',
        'Consider mobile-first approach',
        'Use CSS custom properties',
    ),
    'java': (
        'Follow Java naming conventions',
        'Include proper exception handling',
        'Use appropriate access modifiers',
        'Add JavaDoc comments',
    ),
    'cpp': (
        'Use RAII principles',
        'Include proper memory management',
        'Use standard library containers',
        'Add const correctness',
    ),
})


@dataclass(frozen=True)
class LanguageSuggestion:
    language: str
    score: float
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {'language': self.language, 'score': self.score, 'confidence': self.confidence}


@dataclass(frozen=True)
class AnalysisResult:
    """Ranked language suggestions for a prompt.

    Attributes:
        suggestions: Top suggestions, highest score first
        primary_suggestion: Best language, ``javascript`` when nothing matched
        confidence: Confidence of the primary suggestion (0 when nothing matched)
    """
    suggestions: Tuple[LanguageSuggestion, ...] = field(default_factory=tuple)
    primary_suggestion: str = DEFAULT_LANGUAGE
    confidence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys the front-end reads."""
        return {
            'suggestions': [s.to_dict() for s in self.suggestions],
            'primarySuggestion': self.primary_suggestion,
            'confidence': self.confidence,
        }


def score_to_confidence(score: float) -> float:
    """Normalize a raw score to [0, 1]."""
    return max(0.0, min(score / CONFIDENCE_DIVISOR, 1.0))


def score_languages(prompt: str) -> Dict[str, float]:
    """Raw score of every profiled language, in table order (zeros included)."""
    normalized = prompt.lower()
    scores: Dict[str, float] = {language: 0.0 for language in LANGUAGE_PROFILES}

    for language, profile in LANGUAGE_PROFILES.items():
        for keyword in profile.keywords:
            if keyword in normalized:
                scores[language] += profile.weight * KEYWORD_FACTOR
        for pattern in profile.patterns:
            if pattern.search(prompt):
                scores[language] += profile.weight * PATTERN_FACTOR
        for framework in profile.frameworks:
            if framework in normalized:
                scores[language] += profile.weight * FRAMEWORK_FACTOR

    for project_type, languages in PROJECT_TYPES.items():
        if project_type in normalized:
            for language in languages:
                if language in scores:
                    scores[language] += PROJECT_TYPE_BONUS

    for triggers, boosts in CONTEXT_BOOSTS:
        if any(trigger in normalized for trigger in triggers):
            for language, boost in boosts.items():
                scores[language] += boost

    return scores


def analyze_prompt(prompt: str) -> AnalysisResult:
    """Rank candidate languages for a prompt.

    Args:
        prompt: Free text; empty input yields no suggestions

    Returns:
        AnalysisResult with at most five suggestions
    """
    scores = score_languages(prompt or '')
    # sorted() is stable, so ties keep table order
    ranked = sorted(
        ((language, score) for language, score in scores.items() if score > 0),
        key=lambda item: item[1],
        reverse=True,
    )
    suggestions = tuple(
        LanguageSuggestion(language=language, score=score, confidence=score_to_confidence(score))
        for language, score in ranked[:MAX_SUGGESTIONS]
    )
    if not suggestions:
        return AnalysisResult()
    return AnalysisResult(
        suggestions=suggestions,
        primary_suggestion=suggestions[0].language,
        confidence=suggestions[0].confidence,
    )


def get_framework_suggestions(language: str, prompt: str) -> List[str]:
    """Frameworks of ``language`` that the prompt mentions, in table order."""
    profile = LANGUAGE_PROFILES.get(language)
    if profile is None:
        return []
    normalized = (prompt or '').lower()
    return [framework for framework in profile.frameworks if framework in normalized]


def enhance_prompt(prompt: str, language: str, frameworks: Optional[Sequence[str]] = None) -> str:
    """Append a language directive when the analyzer is confident about the prompt."""
    enhanced = prompt
    if analyze_prompt(prompt).confidence > ENHANCE_CONFIDENCE_THRESHOLD:
        enhanced += f"\n\n// Generate this in {language}"
        if frameworks:
            enhanced += f" using {', '.join(frameworks)}"
    return enhanced


def get_language_hints(language: str) -> List[str]:
    """Static advice strings for a language (empty list when none are known)."""
    return list(LANGUAGE_HINTS.get(language, ()))
