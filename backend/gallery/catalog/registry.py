"""
Component Registry
Static catalog of gallery components.

Flow: COMPONENT_REGISTRY -> seed script (database mode)
                         -> StaticCatalogService (static mode)
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ComponentEntry:
    """A registry entry; field names mirror the Component model attributes."""
    id: str
    name: str
    description: str
    category: str
    tags: List[str]
    file_path: str
    component_path: str
    code: str
    dependencies: List[str] = field(default_factory=list)
    responsive: bool = True
    dark_mode: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


COMPONENT_REGISTRY: List[ComponentEntry] = [
    ComponentEntry(
        id="hero-gradient",
        name="Gradient Hero",
        description="Full-width hero section with an animated gradient background and two call-to-action buttons.",
        category="Hero",
        tags=["hero", "landing", "gradient", "cta"],
        file_path="src/components/gallery/hero/GradientHero.tsx",
        component_path="@/components/gallery/hero/GradientHero",
        code='''export default function GradientHero() {
  return (
    <section className="relative overflow-hidden bg-gradient-to-br from-indigo-500 via-purple-500 to-pink-500 py-24">
      <div className="mx-auto max-w-4xl px-6 text-center text-white">
        <h1 className="text-4xl font-bold sm:text-6xl">Build faster with components</h1>
        <p className="mt-6 text-lg opacity-90">Copy, paste and ship polished interfaces in minutes.</p>
        <div className="mt-10 flex justify-center gap-4">
          <a href="#" className="rounded-lg bg-white px-6 py-3 font-semibold text-indigo-600">Get started</a>
          <a href="#" className="rounded-lg border border-white/60 px-6 py-3 font-semibold">Browse</a>
        </div>
      </div>
    </section>
  );
}
''',
    ),
    ComponentEntry(
        id="pricing-three-tier",
        name="Three Tier Pricing",
        description="Pricing table with three plans, a highlighted recommended tier and feature checklists.",
        category="Pricing",
        tags=["pricing", "cards", "saas"],
        file_path="src/components/gallery/pricing/ThreeTierPricing.tsx",
        component_path="@/components/gallery/pricing/ThreeTierPricing",
        code='''import { Check } from "lucide-react";

const plans = [
  { name: "Starter", price: 0, features: ["1 project", "Community support"] },
  { name: "Pro", price: 19, features: ["Unlimited projects", "Priority support"], featured: true },
  { name: "Team", price: 49, features: ["Seats for 10", "SSO"] },
];

export default function ThreeTierPricing() {
  return (
    <div className="grid gap-6 md:grid-cols-3">
      {plans.map((plan) => (
        <div
          key={plan.name}
          className={`rounded-2xl border p-8 ${plan.featured ? "border-indigo-500 shadow-xl" : "border-gray-200 dark:border-gray-700"}`}
        >
          <h3 className="text-lg font-semibold">{plan.name}</h3>
          <p className="mt-4 text-4xl font-bold">${plan.price}<span className="text-base font-normal">/mo</span></p>
          <ul className="mt-6 space-y-2">
            {plan.features.map((f) => (
              <li key={f} className="flex items-center gap-2"><Check className="h-4 w-4" />{f}</li>
            ))}
          </ul>
        </div>
      ))}
    </div>
  );
}
''',
        dependencies=["lucide-react"],
    ),
    ComponentEntry(
        id="navbar-sticky",
        name="Sticky Navbar",
        description="Top navigation bar that stays pinned while scrolling, with a collapsible mobile menu.",
        category="Navigation",
        tags=["navbar", "navigation", "menu", "mobile"],
        file_path="src/components/gallery/navigation/StickyNavbar.tsx",
        component_path="@/components/gallery/navigation/StickyNavbar",
        code='''"use client";
import { useState } from "react";
import { Menu, X } from "lucide-react";

export default function StickyNavbar() {
  const [open, setOpen] = useState(false);
  return (
    <nav className="sticky top-0 z-50 border-b bg-white/80 backdrop-blur dark:bg-gray-900/80">
      <div className="mx-auto flex max-w-6xl items-center justify-between px-4 py-3">
        <span className="font-bold">Brand</span>
        <button className="md:hidden" onClick={() => setOpen(!open)}>{open ? <X /> : <Menu />}</button>
        <ul className={`${open ? "block" : "hidden"} md:flex md:gap-6`}>
          <li><a href="#">Features</a></li>
          <li><a href="#">Pricing</a></li>
          <li><a href="#">Docs</a></li>
        </ul>
      </div>
    </nav>
  );
}
''',
        dependencies=["lucide-react"],
    ),
    ComponentEntry(
        id="card-profile",
        name="Profile Card",
        description="Compact user card with avatar, bio and social links.",
        category="Cards",
        tags=["card", "profile", "avatar"],
        file_path="src/components/gallery/cards/ProfileCard.tsx",
        component_path="@/components/gallery/cards/ProfileCard",
        code='''export default function ProfileCard() {
  return (
    <div className="w-72 rounded-xl bg-white p-6 text-center shadow dark:bg-gray-800">
      <img className="mx-auto h-20 w-20 rounded-full" src="https://i.pravatar.cc/160" alt="" />
      <h3 className="mt-4 font-semibold">Jane Cooper</h3>
      <p className="text-sm text-gray-500">Frontend engineer who loves design systems.</p>
    </div>
  );
}
''',
    ),
    ComponentEntry(
        id="card-glass",
        name="Glassmorphism Card",
        description="Frosted-glass card with a blurred translucent background over a colorful backdrop.",
        category="Cards",
        tags=["card", "glass", "blur"],
        file_path="src/components/gallery/cards/GlassCard.tsx",
        component_path="@/components/gallery/cards/GlassCard",
        code='''export default function GlassCard() {
  return (
    <div className="rounded-2xl border border-white/30 bg-white/20 p-8 text-white shadow-lg backdrop-blur-md">
      <h3 className="text-xl font-semibold">Frosted</h3>
      <p className="mt-2 text-sm opacity-80">Layered surfaces with depth.</p>
    </div>
  );
}
''',
        dark_mode=False,
    ),
    ComponentEntry(
        id="button-shimmer",
        name="Shimmer Button",
        description="Call-to-action button with a moving highlight animated by framer-motion.",
        category="Buttons",
        tags=["button", "animation", "cta"],
        file_path="src/components/gallery/buttons/ShimmerButton.tsx",
        component_path="@/components/gallery/buttons/ShimmerButton",
        code='''"use client";
import { motion } from "framer-motion";

export default function ShimmerButton({ children = "Get started" }) {
  return (
    <button className="relative overflow-hidden rounded-lg bg-black px-6 py-3 text-white">
      <motion.span
        className="absolute inset-0 -translate-x-full bg-gradient-to-r from-transparent via-white/30 to-transparent"
        animate={{ x: ["-100%", "100%"] }}
        transition={{ repeat: Infinity, duration: 1.6 }}
      />
      <span className="relative">{children}</span>
    </button>
  );
}
''',
        dependencies=["framer-motion"],
    ),
    ComponentEntry(
        id="form-newsletter",
        name="Newsletter Signup",
        description="Inline email capture form with validation feedback.",
        category="Forms",
        tags=["form", "input", "newsletter", "email"],
        file_path="src/components/gallery/forms/NewsletterSignup.tsx",
        component_path="@/components/gallery/forms/NewsletterSignup",
        code='''"use client";
import { useState } from "react";

export default function NewsletterSignup() {
  const [email, setEmail] = useState("");
  const valid = /.+@.+\\..+/.test(email);
  return (
    <form className="flex max-w-md gap-2" onSubmit={(e) => e.preventDefault()}>
      <input
        type="email"
        value={email}
        onChange={(e) => setEmail(e.target.value)}
        placeholder="you@example.com"
        className="flex-1 rounded-lg border px-4 py-2 dark:bg-gray-800"
      />
      <button disabled={!valid} className="rounded-lg bg-indigo-600 px-4 py-2 text-white disabled:opacity-50">
        Subscribe
      </button>
    </form>
  );
}
''',
    ),
    ComponentEntry(
        id="footer-columns",
        name="Multi-column Footer",
        description="Site footer with link columns, copyright line and social icons.",
        category="Footers",
        tags=["footer", "links", "layout"],
        file_path="src/components/gallery/footers/ColumnsFooter.tsx",
        component_path="@/components/gallery/footers/ColumnsFooter",
        code='''const columns = {
  Product: ["Features", "Pricing", "Changelog"],
  Company: ["About", "Careers", "Contact"],
  Legal: ["Privacy", "Terms"],
};

export default function ColumnsFooter() {
  return (
    <footer className="border-t bg-gray-50 py-12 dark:bg-gray-900">
      <div className="mx-auto grid max-w-6xl grid-cols-2 gap-8 px-6 md:grid-cols-3">
        {Object.entries(columns).map(([title, links]) => (
          <div key={title}>
            <h4 className="font-semibold">{title}</h4>
            <ul className="mt-3 space-y-2 text-sm text-gray-500">
              {links.map((l) => <li key={l}><a href="#">{l}</a></li>)}
            </ul>
          </div>
        ))}
      </div>
    </footer>
  );
}
''',
    ),
    ComponentEntry(
        id="modal-confirm",
        name="Confirm Dialog",
        description="Accessible confirmation modal with backdrop, focus trap and destructive action styling.",
        category="Overlays",
        tags=["modal", "dialog", "overlay"],
        file_path="src/components/gallery/overlays/ConfirmDialog.tsx",
        component_path="@/components/gallery/overlays/ConfirmDialog",
        code='''"use client";
import * as Dialog from "@radix-ui/react-dialog";

export default function ConfirmDialog({ onConfirm }: { onConfirm: () => void }) {
  return (
    <Dialog.Root>
      <Dialog.Trigger className="rounded-lg bg-red-600 px-4 py-2 text-white">Delete</Dialog.Trigger>
      <Dialog.Portal>
        <Dialog.Overlay className="fixed inset-0 bg-black/50" />
        <Dialog.Content className="fixed left-1/2 top-1/2 w-96 -translate-x-1/2 -translate-y-1/2 rounded-xl bg-white p-6 dark:bg-gray-800">
          <Dialog.Title className="font-semibold">Are you sure?</Dialog.Title>
          <div className="mt-6 flex justify-end gap-2">
            <Dialog.Close className="rounded-lg border px-4 py-2">Cancel</Dialog.Close>
            <button onClick={onConfirm} className="rounded-lg bg-red-600 px-4 py-2 text-white">Delete</button>
          </div>
        </Dialog.Content>
      </Dialog.Portal>
    </Dialog.Root>
  );
}
''',
        dependencies=["@radix-ui/react-dialog"],
    ),
    ComponentEntry(
        id="stats-grid",
        name="Stats Grid",
        description="Grid of KPI tiles with trend indicators.",
        category="Dashboard",
        tags=["stats", "dashboard", "grid"],
        file_path="src/components/gallery/dashboard/StatsGrid.tsx",
        component_path="@/components/gallery/dashboard/StatsGrid",
        code='''const stats = [
  { label: "Revenue", value: "$48.2k", trend: "+12%" },
  { label: "Users", value: "3,204", trend: "+4%" },
  { label: "Churn", value: "1.8%", trend: "-0.3%" },
];

export default function StatsGrid() {
  return (
    <dl className="grid gap-4 sm:grid-cols-3">
      {stats.map((s) => (
        <div key={s.label} className="rounded-xl border p-5 dark:border-gray-700">
          <dt className="text-sm text-gray-500">{s.label}</dt>
          <dd className="mt-1 text-2xl font-semibold">{s.value}</dd>
          <dd className="text-xs text-emerald-600">{s.trend}</dd>
        </div>
      ))}
    </dl>
  );
}
''',
    ),
    ComponentEntry(
        id="masonry-gallery",
        name="Masonry Image Grid",
        description="Pinterest-style variable-height image grid built on CSS columns.",
        category="Layout",
        tags=["masonry", "grid", "images", "layout"],
        file_path="src/components/gallery/layout/MasonryGrid.tsx",
        component_path="@/components/gallery/layout/MasonryGrid",
        code='''export default function MasonryGrid({ images }: { images: string[] }) {
  return (
    <div className="columns-1 gap-4 sm:columns-2 lg:columns-3">
      {images.map((src) => (
        <img key={src} src={src} alt="" className="mb-4 w-full break-inside-avoid rounded-lg" />
      ))}
    </div>
  );
}
''',
    ),
]
