"""Next-step instructions printed once the project is ready."""

from coddie.core.selection import AuthProvider, Selection


def build_next_steps(selection: Selection, branch: str = "main") -> str:
    """Build the instructions shown after a successful run.

    Args:
        selection: The user's answers
        branch: Branch holding the first commit (used in the push command)
    """
    steps = [f"cd {selection.path}"]

    if selection.auth is AuthProvider.SUPABASE:
        steps.append(
            "📋 Setup Supabase Authentication:\n"
            "1. Create account at https://supabase.com\n"
            "2. Create a new project\n"
            "3. Copy API keys to .env.local (see .env.example)\n"
            "4. Enable authentication providers in Supabase dashboard\n"
            "5. See README.supabase.md for detailed setup"
        )
    elif selection.auth is AuthProvider.CLERK:
        steps.append(
            "📋 Setup Clerk Authentication:\n"
            "1. Create account at https://clerk.com\n"
            "2. Create a new application\n"
            "3. Copy API keys to .env.local (see .env.example)\n"
            "4. Configure OAuth providers if needed\n"
            "5. See README.clerk.md for detailed setup"
        )

    if selection.monitoring:
        steps.append(
            "📋 Sentry Setup Complete:\n"
            "• Error monitoring, tracing, and session replay configured\n"
            "• Visit your Sentry dashboard to view captured data\n"
            "• Test by visiting /sentry-example-page in your app"
        )

    if selection.payments:
        steps.append(
            "📋 Setup Stripe Payments:\n"
            "1. Create account at https://stripe.com\n"
            "2. Get API keys from Stripe Dashboard\n"
            "3. Copy keys to .env.local (see .env.example)\n"
            "4. Create products and prices in Stripe Dashboard\n"
            "5. Set up webhook endpoint for your domain\n"
            "6. See README.stripe.md for detailed setup"
        )

    steps.append(
        "📚 Git Best Practices:\n"
        "• Consider creating a 'develop' branch for feature development\n"
        f"• Keep '{branch}' branch stable for production releases\n"
        "• Use feature branches for new development\n"
        "• Commands: git checkout -b develop && git checkout -b feature/your-feature"
    )
    steps.append(
        "🔗 GitHub Setup (Optional):\n"
        "1. Create a new repository at https://github.com/new\n"
        "2. git remote add origin <your-repo-url>\n"
        f"3. git push -u origin {branch}"
    )
    steps.append("🚀 Start development:\nnpm run dev")

    return "\n\n".join(steps)
