"""Built-in slash commands understood natively by the host application."""
from .models import SlashCommand

BUILTIN_SCOPE = "default"

# (id, name, full_command, content, description, accepts_arguments)
BUILTIN_COMMANDS: tuple[tuple[str, str, str, str, str, bool], ...] = (
    ("default-add-dir", "add-dir", "/add-dir",
     "Add additional working directories",
     "Add additional working directories to the current session",
     False),
    ("default-init", "init", "/init",
     "Initialize project with CLAUDE.md guide",
     "Initialize project with CLAUDE.md guide and setup files",
     False),
    ("default-review", "review", "/review",
     "Request code review",
     "Request a comprehensive code review of recent changes",
     False),
    ("default-commit", "commit", "/commit",
     "Create a git commit",
     "Create a git commit with staged changes and a descriptive message",
     False),
    ("default-review-pr", "review-pr", "/review-pr",
     "Review a pull request",
     "Review a GitHub pull request and provide feedback",
     True),
    ("default-pr", "pr", "/pr",
     "Create a pull request",
     "Create a GitHub pull request from the current branch",
     False),
    ("default-test", "test", "/test",
     "Run tests",
     "Run the project's test suite and analyze results",
     False),
    ("default-fix", "fix", "/fix",
     "Fix errors or issues",
     "Analyze and fix errors, bugs, or issues in the code",
     False),
    ("default-debug", "debug", "/debug",
     "Debug an issue",
     "Help debug and diagnose issues in the code",
     False),
    ("default-explain", "explain", "/explain",
     "Explain code or concepts",
     "Explain how code works or clarify technical concepts",
     False),
    ("default-refactor", "refactor", "/refactor",
     "Refactor code",
     "Refactor code to improve structure, readability, or performance",
     False),
    ("default-optimize", "optimize", "/optimize",
     "Optimize code performance",
     "Optimize code for better performance and efficiency",
     False),
    ("default-docs", "docs", "/docs",
     "Generate documentation",
     "Generate or update code documentation and comments",
     False),
    ("default-security", "security", "/security",
     "Security audit",
     "Perform a security audit and identify vulnerabilities",
     False),
    ("default-remember", "remember", "/remember",
     "Remember information",
     "Store information for future reference in the session",
     True),
    ("default-model", "model", "/model",
     "Switch AI model",
     "Switch between different Claude AI models",
     False),
    ("default-clear", "clear", "/clear",
     "Clear conversation",
     "Clear the current conversation history",
     False),
    ("default-help", "help", "/help",
     "Show help information",
     "Display help information and available commands",
     False),
    ("default-usage", "usage", "/usage",
     "Show usage statistics",
     "Display API usage statistics and costs",
     False),
    ("default-settings", "settings", "/settings",
     "Open settings",
     "Open and manage Claude Code settings",
     False),
    ("default-agents", "agents", "/agents",
     "Manage custom AI subagents",
     "Manage custom AI subagents for specialized tasks",
     False),
    ("default-bashes", "bashes", "/bashes",
     "List and manage background tasks",
     "List and manage background bash tasks",
     False),
    ("default-bug", "bug", "/bug",
     "Report bugs",
     "Report bugs (sends conversation to Anthropic)",
     False),
    ("default-compact", "compact", "/compact",
     "Compact conversation",
     "Compact conversation with optional focus instructions",
     True),
    ("default-config", "config", "/config",
     "Open settings interface",
     "Open the Settings interface (Config tab). Type to search and filter settings",
     False),
    ("default-context", "context", "/context",
     "Visualize context usage",
     "Visualize current context usage as a colored grid",
     False),
    ("default-cost", "cost", "/cost",
     "Show token usage statistics",
     "Show token usage statistics and cost tracking",
     False),
    ("default-doctor", "doctor", "/doctor",
     "Check installation health",
     "Checks installation health and shows update information",
     False),
    ("default-exit", "exit", "/exit",
     "Exit the REPL",
     "Exit the Claude Code REPL interface",
     False),
    ("default-export", "export", "/export",
     "Export conversation",
     "Export the current conversation to a file or clipboard",
     True),
    ("default-hooks", "hooks", "/hooks",
     "Manage hook configurations",
     "Manage hook configurations for tool events",
     False),
    ("default-ide", "ide", "/ide",
     "Manage IDE integrations",
     "Manage IDE integrations and show status",
     False),
    ("default-install-github-app", "install-github-app", "/install-github-app",
     "Set up Claude GitHub Actions",
     "Set up Claude GitHub Actions for a repository",
     False),
    ("default-login", "login", "/login",
     "Switch Anthropic accounts",
     "Switch between different Anthropic accounts",
     False),
    ("default-logout", "logout", "/logout",
     "Sign out from account",
     "Sign out from your Anthropic account",
     False),
    ("default-mcp", "mcp", "/mcp",
     "Manage MCP server connections",
     "Manage MCP server connections and OAuth authentication",
     False),
    ("default-memory", "memory", "/memory",
     "Edit CLAUDE.md memory files",
     "Edit CLAUDE.md memory files for project context",
     False),
    ("default-output-style", "output-style", "/output-style",
     "Set output style",
     "Set the output style directly or from a selection menu",
     True),
    ("default-permissions", "permissions", "/permissions",
     "View or update permissions",
     "View or update tool and command permissions",
     False),
    ("default-plan", "plan", "/plan",
     "Enter plan mode",
     "Enter plan mode directly from the prompt",
     False),
    ("default-plugin", "plugin", "/plugin",
     "Manage Claude Code plugins",
     "Manage and configure Claude Code plugins",
     False),
    ("default-pr-comments", "pr-comments", "/pr-comments",
     "View pull request comments",
     "View and manage pull request comments",
     False),
    ("default-privacy-settings", "privacy-settings", "/privacy-settings",
     "View and update privacy settings",
     "View and update your privacy settings",
     False),
    ("default-release-notes", "release-notes", "/release-notes",
     "View release notes",
     "View Claude Code release notes and changelog",
     False),
    ("default-rename", "rename", "/rename",
     "Rename current session",
     "Rename the current session for easier identification",
     True),
    ("default-remote-env", "remote-env", "/remote-env",
     "Configure remote session environment",
     "Configure remote session environment (claude.ai subscribers)",
     False),
    ("default-resume", "resume", "/resume",
     "Resume a conversation",
     "Resume a conversation by ID or name, or open the session picker",
     True),
    ("default-rewind", "rewind", "/rewind",
     "Rewind the conversation",
     "Rewind the conversation and/or code to a previous state",
     False),
    ("default-sandbox", "sandbox", "/sandbox",
     "Enable sandboxed bash tool",
     "Enable sandboxed bash tool with filesystem and network isolation",
     False),
    ("default-security-review", "security-review", "/security-review",
     "Complete security review",
     "Complete a security review of pending changes on the current branch",
     False),
    ("default-stats", "stats", "/stats",
     "Visualize usage statistics",
     "Visualize daily usage, session history, streaks, and model preferences",
     False),
    ("default-status", "status", "/status",
     "Open status interface",
     "Open the Settings interface (Status tab) showing version, model, account, and connectivity",
     False),
    ("default-statusline", "statusline", "/statusline",
     "Set up status line UI",
     "Set up Claude Code's status line UI configuration",
     False),
    ("default-teleport", "teleport", "/teleport",
     "Resume remote session",
     "Resume a remote session from claude.ai by session ID, or open a picker (claude.ai subscribers)",
     True),
    ("default-terminal-setup", "terminal-setup", "/terminal-setup",
     "Install terminal key bindings",
     "Install Shift+Enter key binding for newlines (VS Code, Alacritty, Zed, Warp)",
     False),
    ("default-theme", "theme", "/theme",
     "Change color theme",
     "Change the Claude Code color theme",
     False),
    ("default-todos", "todos", "/todos",
     "List current TODO items",
     "List and manage current TODO items in the session",
     False),
    ("default-vim", "vim", "/vim",
     "Enter vim mode",
     "Enter vim mode for alternating insert and command modes",
     False),
)


def default_commands() -> list[SlashCommand]:
    """Return fresh SlashCommand records for the built-in table, in table order."""
    return [
        SlashCommand(
            id=command_id,
            name=name,
            full_command=full_command,
            scope=BUILTIN_SCOPE,
            content=content,
            description=description,
            accepts_arguments=accepts_arguments,
        )
        for command_id, name, full_command, content, description, accepts_arguments
        in BUILTIN_COMMANDS
    ]
