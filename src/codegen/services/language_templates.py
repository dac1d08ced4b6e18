"""Fallback Code Templates
=========================

Deterministic per-language skeletons used whenever the remote completion API
is unavailable. Each template is a pure function of the prompt: it embeds the
prompt verbatim and shows the language's usual entry point with an
"Implementation here" placeholder.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

TemplateFn = Callable[[str], str]


def _javascript(prompt: str) -> str:
    return f"""// {prompt}

// Generated JavaScript code
function solution() {{
  // Implementation here
  return 'result';
}}

// Usage
const result = solution();
console.log(result);"""


def _python(prompt: str) -> str:
    return f'''# {prompt}

def solution():
    """
    Implementation based on: {prompt}
    """
    # Implementation here
    return 'result'

# Usage
if __name__ == "__main__":
    result = solution()
    print(result)'''


def _java(prompt: str) -> str:
    return f"""// {prompt}

public class Solution {{
    public static void main(String[] args) {{
        Solution solution = new Solution();
        String result = solution.solve();
        System.out.println(result);
    }}

    public String solve() {{
        // Implementation here
        return "result";
    }}
}}"""


def _cpp(prompt: str) -> str:
    return f"""// {prompt}

#include <iostream>
#include <string>

class Solution {{
public:
    std::string solve() {{
        // Implementation here
        return "result";
    }}
}};

int main() {{
    Solution solution;
    std::string result = solution.solve();
    std::cout << result << std::endl;
    return 0;
}}"""


def _csharp(prompt: str) -> str:
    return f"""// {prompt}

using System;

class Program {{
    static void Main() {{
        var solution = new Solution();
        var result = solution.Solve();
        Console.WriteLine(result);
    }}
}}

class Solution {{
    public string Solve() {{
        // Implementation here
        return "result";
    }}
}}"""


def _php(prompt: str) -> str:
    return f"""<?php
// {prompt}

class Solution {{
    public function solve() {{
        // Implementation here
        return 'result';
    }}
}}

// Usage
$solution = new Solution();
$result = $solution->solve();
echo $result;
?>"""


def _ruby(prompt: str) -> str:
    return f"""# {prompt}

class Solution
  def solve
    # Implementation here
    'result'
  end
end

# Usage
solution = Solution.new
result = solution.solve
puts result"""


def _go(prompt: str) -> str:
    return f"""// {prompt}

package main

import "fmt"

func solution() string {{
    // Implementation here
    return "result"
}}

func main() {{
    result := solution()
    fmt.Println(result)
}}"""


def _rust(prompt: str) -> str:
    return f"""// {prompt}

fn solution() -> String {{
    // Implementation here
    String::from("result")
}}

fn main() {{
    let result = solution();
    println!("{{}}", result);
}}"""


def _swift(prompt: str) -> str:
    return f"""// {prompt}

class Solution {{
    func solve() -> String {{
        // Implementation here
        return "result"
    }}
}}

// Usage
let solution = Solution()
let result = solution.solve()
print(result)"""


def _html(prompt: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{prompt}</title>
    <style>
        body {{
            font-family: Arial, sans-serif;
            margin: 0;
            padding: 20px;
            line-height: 1.6;
        }}
        .container {{
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            border: 1px solid #ddd;
            border-radius: 5px;
        }}
        h1 {{
            color: #333;
        }}
        button {{
            background-color: #4CAF50;
            color: white;
            border: none;
            padding: 10px 15px;
            border-radius: 4px;
            cursor: pointer;
        }}
        button:hover {{
            background-color: #45a049;
        }}
    </style>
</head>
<body>
    <div class="container">
        <h1>{prompt}</h1>
        <p>This is a sample HTML page generated for: {prompt}</p>
        <button onclick="alert('Button clicked!')">Click Me</button>
    </div>
    <script>
        console.log('HTML page loaded successfully');
    </script>
</body>
</html>"""


LANGUAGE_TEMPLATES: Mapping[str, TemplateFn] = MappingProxyType({
    'javascript': _javascript,
    'python': _python,
    'java': _java,
    'cpp': _cpp,
    'csharp': _csharp,
    'php': _php,
    'ruby': _ruby,
    'go': _go,
    'rust': _rust,
    'swift': _swift,
    'html': _html,
})


def has_template(language: str) -> bool:
    return language in LANGUAGE_TEMPLATES


def generic_placeholder(prompt: str, language: str) -> str:
    """Two comment lines plus a no-op statement for languages without a template."""
    return f"// {prompt}\n// Generated code for {language}\nconsole.log('Code generated successfully');"


def render_template(prompt: str, language: str) -> str:
    """Render the fallback skeleton for ``language``; never raises."""
    template = LANGUAGE_TEMPLATES.get(language)
    if template is None:
        return generic_placeholder(prompt, language)
    return template(prompt)
